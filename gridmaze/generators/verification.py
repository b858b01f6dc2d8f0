"""
Structural checks for generated mazes.

A perfect maze must satisfy:
1. Connectivity: every cell reachable from every other cell
2. Acyclicity: exactly (n-1) passages for n cells

Additionally the redundant wall storage must agree on both sides of every
wall, and no boundary cell may open toward the outside.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from gridmaze.core.cell import Direction

if TYPE_CHECKING:
    from gridmaze.core.grid import Grid


def count_passages(grid: Grid) -> int:
    """Number of opened walls, counting each cell's top and right flags."""
    return sum(cell.top + cell.right for _, _, cell in grid)


def check_wall_symmetry(grid: Grid) -> list[tuple[int, int, Direction]]:
    """
    Find inconsistent wall flags.

    Returns:
        ``(x, y, direction)`` for every flag that disagrees with the mirrored
        flag of its neighbor, or that is open toward the outside of the grid.
        An empty list means the grid is consistent.
    """
    problems = []
    for x, y, cell in grid:
        for direction in Direction:
            target = grid.neighbor(x, y, direction)
            if target is None:
                if cell.is_open(direction):
                    problems.append((x, y, direction))
                continue

            other = grid.cell(*target)
            if cell.is_open(direction) != other.is_open(direction.opposite):
                problems.append((x, y, direction))
    return problems


def verify_perfect_maze(grid: Grid) -> dict[str, Any]:
    """
    Verify that a maze is perfect (fully connected, no loops).

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - is_symmetric: Mirrored wall flags agree
        - visited_cells: Number of cells reachable from (0, 0)
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    total_cells = len(grid)
    visited_count = 0

    if total_cells > 0:
        visited = {(0, 0)}
        queue = deque([(0, 0)])

        while queue:
            x, y = queue.popleft()
            cell = grid.cell(x, y)
            for direction in Direction:
                target = grid.neighbor(x, y, direction)
                if target is not None and target not in visited and cell.is_open(direction):
                    visited.add(target)
                    queue.append(target)

        visited_count = len(visited)

    is_connected = visited_count == total_cells

    passage_count = count_passages(grid)
    expected_passages = max(total_cells - 1, 0)
    is_no_loops = passage_count == expected_passages
    is_symmetric = not check_wall_symmetry(grid)

    return {
        "is_perfect": is_connected and is_no_loops and is_symmetric,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "is_symmetric": is_symmetric,
        "visited_cells": visited_count,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }
