"""
Binary Tree maze generation.

Every cell opens exactly one wall, either toward the top or toward the
right, chosen by a fair coin. Cells in the top row are forced right and
cells in the rightmost column are forced up; the top-right corner opens
nothing. The result is always a perfect maze, with a fully open top row
and rightmost column and a strong diagonal bias.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import ClassVar

from gridmaze.core.cell import Direction
from gridmaze.core.grid import Grid
from gridmaze.generators.base import format_maze_title, make_rng
from gridmaze.utils.maze_logging import get_logger, log_generation_complete, log_generation_start

logger = get_logger(__name__)


@dataclass(frozen=True)
class BinaryTree:
    """Maze carved with the Binary Tree algorithm."""

    algorithm_name: ClassVar[str] = "BinaryTree"

    grid: Grid

    @classmethod
    def create(cls, width: int, height: int, seed: int | None = None) -> BinaryTree:
        """
        Generate a Binary Tree maze.

        Args:
            width: Number of columns
            height: Number of rows
            seed: Random seed for reproducibility (None draws from OS entropy)

        Returns:
            BinaryTree wrapping the carved, frozen grid
        """
        grid = Grid(width, height)
        rng = make_rng(seed)
        log_generation_start(logger, cls.algorithm_name, width, height)
        start = time.perf_counter()

        passages = 0
        for y in range(height):
            for x in range(width):
                head = rng.random() < 0.5
                if y < height - 1 and (head or x == width - 1):
                    passages += grid.link(x, y, Direction.TOP)
                if x < width - 1 and (not head or y == height - 1):
                    passages += grid.link(x, y, Direction.RIGHT)

        log_generation_complete(
            logger, cls.algorithm_name, width, height, time.perf_counter() - start, passages
        )
        return cls(grid.freeze())

    def __str__(self) -> str:
        return format_maze_title(self.algorithm_name, self.grid)
