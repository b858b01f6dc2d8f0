"""Maze data structures: cells and the grid that stores and renders them."""

from .cell import Cell, Direction
from .grid import Grid

__all__ = ["Cell", "Direction", "Grid"]
