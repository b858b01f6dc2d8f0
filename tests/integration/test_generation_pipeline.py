"""
Integration tests: configuration -> generation -> verification -> rendering.
"""

import pytest

import numpy as np

import gridmaze
from gridmaze import MazeConfig, create_maze_from_config, verify_perfect_maze


@pytest.mark.parametrize("algorithm", gridmaze.available_algorithms())
@pytest.mark.parametrize(("width", "height"), [(1, 1), (4, 3), (16, 9), (40, 25)])
def test_config_to_rendered_maze(algorithm, width, height):
    config = MazeConfig(width=width, height=height, algorithm=algorithm, seed=2024)

    maze = create_maze_from_config(config)
    verification = verify_perfect_maze(maze.grid)

    assert verification["is_perfect"], verification

    title, _, diagram = str(maze).partition("\n")
    assert title == f"{maze.algorithm_name} {width}x{height} Maze:"

    lines = diagram.splitlines()
    expected_lines, expected_columns = config.get_text_dimensions()
    assert len(lines) == expected_lines
    assert all(len(line) == expected_columns for line in lines)
    assert lines[0] == "+" + "---+" * width
    assert lines[-1] == "+" + "---+" * width


@pytest.mark.parametrize("algorithm", gridmaze.available_algorithms())
def test_text_and_array_agree_on_walls(algorithm):
    """Every open right separator in the text is a passage pixel in the array."""
    maze = gridmaze.create_maze(10, 6, algorithm=algorithm, seed=7)
    grid = maze.grid
    lines = grid.to_text().splitlines()
    array = grid.to_numpy_array(wall_thickness=1)

    for row_index in range(grid.height):
        y = grid.height - 1 - row_index
        body = lines[2 * row_index + 1]
        for x in range(grid.width):
            separator_open = body[4 * (x + 1)] == " "
            pixel_open = array[row_index * 3 + 1, x * 3 + 2] == 0
            assert separator_open == pixel_open == grid.cell(x, y).right


def test_large_maze_generation():
    maze = gridmaze.SideWinder.create(200, 150, seed=1)

    verification = verify_perfect_maze(maze.grid)

    assert verification["is_perfect"]
    assert verification["passage_count"] == 200 * 150 - 1
    assert np.count_nonzero(maze.grid.to_numpy_array() == 0) == 200 * 150 + 2 * (200 * 150 - 1)


def test_package_version():
    assert isinstance(gridmaze.__version__, str)
