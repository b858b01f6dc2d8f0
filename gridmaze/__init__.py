from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gridmaze")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeConfig, create_default_config
from .core import Cell, Direction, Grid
from .generators import (
    BinaryTree,
    GeneratorAlgorithm,
    MazeAlgorithm,
    SideWinder,
    available_algorithms,
    check_wall_symmetry,
    count_passages,
    create_maze,
    create_maze_from_config,
    get_generator_class,
    verify_perfect_maze,
)
from .utils import FrozenGridError, MazeConfigurationError, MazeError, configure_logging, get_logger

__all__ = [
    "__version__",
    # Data structures
    "Cell",
    "Direction",
    "Grid",
    # Algorithms
    "BinaryTree",
    "GeneratorAlgorithm",
    "MazeAlgorithm",
    "SideWinder",
    "available_algorithms",
    "create_maze",
    "create_maze_from_config",
    "get_generator_class",
    # Verification
    "check_wall_symmetry",
    "count_passages",
    "verify_perfect_maze",
    # Configuration
    "MazeConfig",
    "create_default_config",
    # Errors and logging
    "FrozenGridError",
    "MazeConfigurationError",
    "MazeError",
    "configure_logging",
    "get_logger",
]
