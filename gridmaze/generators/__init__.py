"""
Maze generation algorithms.

Both algorithms produce perfect mazes (a spanning tree over every cell):
- Binary Tree: each cell opens up or right, strong diagonal bias
- Sidewinder: row-wise runs closed by a random upward opening

Examples
--------
>>> from gridmaze.generators import BinaryTree, SideWinder, verify_perfect_maze
>>> print(BinaryTree.create(4, 3))
>>> maze = SideWinder.create(10, 10, seed=1)
>>> verify_perfect_maze(maze.grid)["is_perfect"]
True
"""

from .base import GeneratorAlgorithm, MazeAlgorithm
from .binary_tree import BinaryTree
from .factory import available_algorithms, create_maze, create_maze_from_config, get_generator_class
from .sidewinder import SideWinder
from .verification import check_wall_symmetry, count_passages, verify_perfect_maze

__all__ = [
    # Core generation
    "BinaryTree",
    "GeneratorAlgorithm",
    "MazeAlgorithm",
    "SideWinder",
    # Factory
    "available_algorithms",
    "create_maze",
    "create_maze_from_config",
    "get_generator_class",
    # Verification
    "check_wall_symmetry",
    "count_passages",
    "verify_perfect_maze",
]
