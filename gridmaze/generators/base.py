"""
Common contract for maze generation algorithms.

Each algorithm is an independent class that satisfies ``GeneratorAlgorithm``:
a ``create`` classmethod that carves a fresh grid and returns an immutable
maze wrapping it. The algorithms share no base class.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gridmaze.core.grid import Grid


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"


@runtime_checkable
class GeneratorAlgorithm(Protocol):
    """
    Protocol satisfied by every generated maze type.

    Attributes:
        algorithm_name: Display name used in the printable form
        grid: The fully carved, frozen grid
    """

    algorithm_name: ClassVar[str]
    grid: Grid

    @classmethod
    def create(cls, width: int, height: int, seed: int | None = None) -> GeneratorAlgorithm: ...


def make_rng(seed: int | None) -> random.Random:
    """Random generator local to one generation call; seeded from OS entropy when ``seed`` is None."""
    return random.Random(seed)


def format_maze_title(algorithm_name: str, grid: Grid) -> str:
    """Printable form of a generated maze: title line followed by the diagram."""
    return f"{algorithm_name} {grid.width}x{grid.height} Maze:\n{grid.to_text()}"
