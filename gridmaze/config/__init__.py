"""Validated configuration for maze generation."""

from .maze_config import MazeConfig, create_default_config

__all__ = ["MazeConfig", "create_default_config"]
