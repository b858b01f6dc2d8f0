"""
Sidewinder maze generation.

Works row by row, keeping a run of consecutive cells joined horizontally.
When a coin flip (or the end of the row) closes the run, one random cell of
the run is opened upward and the run starts over. The top row cannot open
upward, so it becomes one long corridor.

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
class SideWinder:
    """Maze carved with the Sidewinder algorithm."""

    algorithm_name: ClassVar[str] = "SideWinder"

    grid: Grid

    @classmethod
    def create(cls, width: int, height: int, seed: int | None = None) -> SideWinder:
        """
        Generate a Sidewinder maze.

        Args:
            width: Number of columns
            height: Number of rows
            seed: Random seed for reproducibility (None draws from OS entropy)

        Returns:
            SideWinder wrapping the carved, frozen grid
        """
        grid = Grid(width, height)
        rng = make_rng(seed)
        log_generation_start(logger, cls.algorithm_name, width, height)
        start = time.perf_counter()

        passages = 0
        run: list[tuple[int, int]] = []
        for y in range(height):
            for x in range(width):
                run.append((x, y))
                head = rng.random() < 0.5
                if y < height - 1 and (head or x == width - 1):
                    cx, cy = rng.choice(run)
                    passages += grid.link(cx, cy, Direction.TOP)
                    run = []
                if x < width - 1 and (not head or y == height - 1):
                    passages += grid.link(x, y, Direction.RIGHT)

        log_generation_complete(
            logger, cls.algorithm_name, width, height, time.perf_counter() - start, passages
        )
        return cls(grid.freeze())

    def __str__(self) -> str:
        return format_maze_title(self.algorithm_name, self.grid)
