"""
Algorithm registry and convenience constructors.

Example:
    >>> from gridmaze.generators import create_maze
    >>> maze = create_maze(8, 5, algorithm="sidewinder", seed=42)
    >>> print(maze)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generators.base import GeneratorAlgorithm, MazeAlgorithm
from gridmaze.generators.binary_tree import BinaryTree
from gridmaze.generators.sidewinder import SideWinder
from gridmaze.utils.exceptions import MazeConfigurationError
from gridmaze.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from gridmaze.config.maze_config import MazeConfig

logger = get_logger(__name__)

_GENERATORS: dict[MazeAlgorithm, type[BinaryTree] | type[SideWinder]] = {
    MazeAlgorithm.BINARY_TREE: BinaryTree,
    MazeAlgorithm.SIDEWINDER: SideWinder,
}


def available_algorithms() -> list[str]:
    """Names accepted by ``create_maze``."""
    return [algorithm.value for algorithm in MazeAlgorithm]


def get_generator_class(algorithm: MazeAlgorithm | str) -> type[BinaryTree] | type[SideWinder]:
    """
    Look up the maze class for an algorithm.

    Args:
        algorithm: MazeAlgorithm member or its string value

    Raises:
        MazeConfigurationError: If the algorithm name is unknown
    """
    try:
        alg_enum = MazeAlgorithm(algorithm)
    except ValueError:
        logger.error(f"Unknown maze algorithm: {algorithm!r}")
        raise MazeConfigurationError(
            parameter_name="algorithm",
            provided_value=algorithm,
            valid_choices=available_algorithms(),
            component="factory",
        ) from None

    return _GENERATORS[alg_enum]


def create_maze(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.BINARY_TREE,
    seed: int | None = None,
) -> GeneratorAlgorithm:
    """
    Generate a maze with the named algorithm.

    Args:
        width: Number of columns
        height: Number of rows
        algorithm: 'binary_tree' or 'sidewinder'
        seed: Random seed for reproducibility

    Returns:
        BinaryTree or SideWinder maze
    """
    return get_generator_class(algorithm).create(width, height, seed=seed)


def create_maze_from_config(config: MazeConfig) -> GeneratorAlgorithm:
    """Generate a maze described by a validated ``MazeConfig``."""
    return create_maze(config.width, config.height, algorithm=config.algorithm, seed=config.seed)
