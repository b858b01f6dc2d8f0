"""
Validated maze generation configuration.

Example:
    >>> from gridmaze.config import MazeConfig
    >>> config = MazeConfig(width=20, height=10, algorithm="sidewinder", seed=7)
    >>> config.get_text_dimensions()
    (21, 81)
"""

from __future__ import annotations

import warnings

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridmaze.generators.base import MazeAlgorithm

LARGE_MAZE_CELLS = 1_000_000


class MazeConfig(BaseModel):
    """
    Configuration for a single maze generation call.

    Dimensions of zero are accepted and produce an empty maze.
    """

    width: int = Field(10, ge=0, description="Number of columns")
    height: int = Field(10, ge=0, description="Number of rows")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.BINARY_TREE, description="Carving algorithm")
    seed: int | None = Field(None, description="Random seed (None for a fresh maze every call)")

    @model_validator(mode="after")
    def validate_maze_size(self) -> MazeConfig:
        """Warn about mazes large enough to make rendering impractical."""
        if self.width * self.height > LARGE_MAZE_CELLS:
            warnings.warn(
                f"Large maze ({self.width}x{self.height} = {self.width * self.height} cells) will be slow to render",
                UserWarning,
            )
        return self

    model_config = ConfigDict(validate_assignment=True)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def get_text_dimensions(self) -> tuple[int, int]:
        """
        Size of the rendered diagram.

        Returns:
            (lines, columns) of ``Grid.to_text`` for these dimensions
        """
        return 2 * self.height + 1, 4 * self.width + 1


def create_default_config(width: int, height: int, algorithm: str = "binary_tree") -> MazeConfig:
    """Create a configuration with an unseeded generator."""
    return MazeConfig(width=width, height=height, algorithm=algorithm)
