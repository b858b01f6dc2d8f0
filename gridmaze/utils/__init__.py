"""Shared utilities for gridmaze: exceptions and logging."""

from __future__ import annotations

from .exceptions import FrozenGridError, MazeConfigurationError, MazeError, validate_dimension
from .maze_logging import configure_logging, get_logger

__all__ = [
    "FrozenGridError",
    "MazeConfigurationError",
    "MazeError",
    "configure_logging",
    "get_logger",
    "validate_dimension",
]
