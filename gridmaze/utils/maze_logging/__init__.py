"""
Logging utilities for gridmaze.

Usage:
    >>> from gridmaze.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Carving...")
"""

from __future__ import annotations

from .logger import (
    MazeFormatter,
    MazeLogger,
    configure_logging,
    get_logger,
    log_generation_complete,
    log_generation_start,
    log_performance_metric,
)

__all__ = [
    "MazeFormatter",
    "MazeLogger",
    "configure_logging",
    "get_logger",
    "log_generation_complete",
    "log_generation_start",
    "log_performance_metric",
]
