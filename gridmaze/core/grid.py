"""
Grid of maze cells with bounds-checked access and text rendering.

Cells are stored row-major in a flat list, ``(x, y) -> y * width + x``,
with row 0 at the bottom of the maze. Every opening is stored twice, once
on each side of the wall; ``Grid.link`` is the only carving path and keeps
both flags in step.

Text layout (4 characters per column, 2 lines per row)::

    +---+---+---+
    |           |
    +   +---+   +
    |   |       |
    +---+---+---+

Each cell contributes ``"---+"`` or ``"   +"`` to its row's top line
depending on its ``top`` flag, and ``"   |"`` or ``"    "`` to its body
line depending on its ``right`` flag. The bottom border is always closed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.cell import Cell, Direction
from gridmaze.utils.exceptions import FrozenGridError, MazeConfigurationError, validate_dimension
from gridmaze.utils.maze_logging import get_logger, log_performance_metric

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

CELL_TOP_CLOSED = "---+"
CELL_TOP_OPEN = "   +"
CELL_BODY_CLOSED = "   |"
CELL_BODY_OPEN = "    "


class Grid:
    """Fixed-size grid of cells for maze generation."""

    def __init__(self, width: int, height: int):
        """
        Initialize a grid with every wall closed.

        Args:
            width: Number of columns (0 gives an empty grid)
            height: Number of rows (0 gives an empty grid)

        Raises:
            MazeConfigurationError: If a dimension is negative or not an int
        """
        self._width = validate_dimension(width, "width", component="Grid")
        self._height = validate_dimension(height, "height", component="Grid")
        self._cells = [Cell() for _ in range(width * height)]
        self._frozen = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` in row-major order; cells are copies."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y, self._cells[self._cell_index(x, y)].copy()

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, frozen={self._frozen})"

    def __str__(self) -> str:
        return self.to_text()

    def _cell_index(self, x: int, y: int) -> int:
        return y * self._width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell | None:
        """
        Get a copy of the cell at ``(x, y)``.

        Returns:
            Cell copy if the position is inside the grid, None otherwise
        """
        if not self.in_bounds(x, y):
            return None
        return self._cells[self._cell_index(x, y)].copy()

    def mutable_cell(self, x: int, y: int) -> Cell | None:
        """
        Get the stored cell at ``(x, y)`` for in-place changes.

        Changing one cell does not update its neighbor; prefer ``link``.

        Returns:
            The stored Cell if the position is inside the grid, None otherwise

        Raises:
            FrozenGridError: If the grid has been frozen and the position is inside it
        """
        if not self.in_bounds(x, y):
            return None
        self._check_not_frozen("mutable_cell")
        return self._cells[self._cell_index(x, y)]

    def neighbor(self, x: int, y: int, direction: Direction) -> tuple[int, int] | None:
        """Coordinates of the neighbor of ``(x, y)`` toward ``direction``, if inside the grid."""
        nx, ny = x + direction.dx, y + direction.dy
        if self.in_bounds(x, y) and self.in_bounds(nx, ny):
            return nx, ny
        return None

    def link(self, x: int, y: int, direction: Direction) -> bool:
        """
        Open the wall between ``(x, y)`` and its neighbor toward ``direction``.

        Both mirrored flags are set. Nothing changes when either side lies
        outside the grid.

        Returns:
            True if a passage was opened, False if the wall is on the boundary

        Raises:
            FrozenGridError: If the grid has been frozen
        """
        self._check_not_frozen("link")
        target = self.neighbor(x, y, direction)
        if target is None:
            return False

        self._cells[self._cell_index(x, y)].open(direction)
        self._cells[self._cell_index(*target)].open(direction.opposite)
        return True

    def freeze(self) -> Grid:
        """Make the grid read-only. Returns the grid for chaining."""
        if not self._frozen:
            self._frozen = True
            logger.debug(f"Froze {self._width}x{self._height} grid")
        return self

    def _check_not_frozen(self, operation: str) -> None:
        if self._frozen:
            raise FrozenGridError(operation, self._width, self._height)

    def to_text(self) -> str:
        """
        Render the maze as a text diagram.

        Rows are emitted top to bottom (logical row ``height - 1`` first),
        followed by a closed bottom border. An empty string is returned when
        the grid has no rows.
        """
        start = time.perf_counter()
        lines = []
        for y in reversed(range(self._height)):
            row = [self._cells[self._cell_index(x, y)] for x in range(self._width)]
            lines.append("+" + "".join(CELL_TOP_OPEN if cell.top else CELL_TOP_CLOSED for cell in row))
            lines.append("|" + "".join(CELL_BODY_OPEN if cell.right else CELL_BODY_CLOSED for cell in row))

        if self._height > 0:
            lines.append("+" + CELL_TOP_CLOSED * self._width)

        text = "".join(line + "\n" for line in lines)
        log_performance_metric(
            logger,
            "to_text",
            time.perf_counter() - start,
            {"grid": f"{self._width}x{self._height}", "lines": len(lines)},
            level=logging.DEBUG,
        )
        return text

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray[np.int32]:
        """
        Export the wall structure as an occupancy array.

        This is a structural view of the carved passages for numerical use,
        not a rendering style; ``to_text`` remains the only printable form.
        The first array row is the top of the maze, matching ``to_text``.

        Args:
            wall_thickness: Array cells per wall, the resolution of the export

        Returns:
            Array of shape ``(height * s + t, width * s + t)`` with
            ``s = 2t + 1``, where 1 = wall and 0 = passage
        """
        if isinstance(wall_thickness, bool) or not isinstance(wall_thickness, int) or wall_thickness < 1:
            raise MazeConfigurationError(
                parameter_name="wall_thickness",
                provided_value=wall_thickness,
                expected_type=int,
                valid_range=(1, None),
                component="Grid",
            )

        t = wall_thickness
        cell_size = 2 * t + 1
        maze = np.ones((self._height * cell_size + t, self._width * cell_size + t), dtype=np.int32)

        for x, y, cell in self:
            r_start = (self._height - 1 - y) * cell_size + t
            c_start = x * cell_size + t

            maze[r_start : r_start + t, c_start : c_start + t] = 0

            if cell.top:
                maze[r_start - t : r_start, c_start : c_start + t] = 0
            if cell.bottom:
                maze[r_start + t : r_start + 2 * t, c_start : c_start + t] = 0
            if cell.left:
                maze[r_start : r_start + t, c_start - t : c_start] = 0
            if cell.right:
                maze[r_start : r_start + t, c_start + t : c_start + 2 * t] = 0

        return maze
