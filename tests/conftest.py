"""
Pytest configuration and shared fixtures for the gridmaze test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import pytest

from gridmaze import BinaryTree, Direction, Grid, SideWinder

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.path)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Grid Fixtures
# =============================================================================


@pytest.fixture
def closed_grid():
    """3x2 grid with every wall closed."""
    return Grid(3, 2)


@pytest.fixture
def hand_carved_grid():
    """
    3x2 grid carved by hand as a Binary Tree would carve it.

        +---+---+---+
        |           |
        +   +---+   +
        |   |       |
        +---+---+---+
    """
    grid = Grid(3, 2)
    grid.link(0, 0, Direction.TOP)
    grid.link(1, 0, Direction.RIGHT)
    grid.link(2, 0, Direction.TOP)
    grid.link(0, 1, Direction.RIGHT)
    grid.link(1, 1, Direction.RIGHT)
    return grid


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture(params=[BinaryTree, SideWinder], ids=["binary_tree", "sidewinder"])
def generator_class(request):
    """Parametrized fixture returning each maze generator class."""
    return request.param


@pytest.fixture
def small_binary_tree():
    return BinaryTree.create(6, 4, seed=42)


@pytest.fixture
def small_sidewinder():
    return SideWinder.create(6, 4, seed=42)
