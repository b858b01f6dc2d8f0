"""
Maze cell and carving directions.

A cell records one opening flag per cardinal neighbor. Row 0 is the bottom
row of the maze, so TOP points toward increasing ``y``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Direction(Enum):
    """Cardinal directions with grid offsets and the matching Cell attribute."""

    LEFT = ("left", -1, 0)
    RIGHT = ("right", 1, 0)
    TOP = ("top", 0, 1)
    BOTTOM = ("bottom", 0, -1)

    def __init__(self, attribute: str, dx: int, dy: int):
        self.attribute = attribute
        self.dx = dx
        self.dy = dy

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}


@dataclass
class Cell:
    """
    Represents a cell in the maze grid.

    Attributes:
        left: Passage exists to the left neighbor
        right: Passage exists to the right neighbor
        top: Passage exists to the neighbor above
        bottom: Passage exists to the neighbor below

    A default cell is fully walled. Cells carry no position; the grid
    that stores them defines where they are.
    """

    left: bool = False
    right: bool = False
    top: bool = False
    bottom: bool = False

    def is_open(self, direction: Direction) -> bool:
        """Whether an opening exists toward ``direction``."""
        return getattr(self, direction.attribute)

    def open(self, direction: Direction) -> None:
        """Set the opening flag toward ``direction`` on this cell only."""
        setattr(self, direction.attribute, True)

    @property
    def openings(self) -> int:
        return self.left + self.right + self.top + self.bottom

    def copy(self) -> Cell:
        return replace(self)
