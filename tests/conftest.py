"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from maze_game.config import Settings
from maze_game.core.maze_parser import Grid, load_maze_lines

# 5x5 maze: start at (1, 1), exit at (3, 3)
SIMPLE_MAZE = [
    "#####",
    "#S  #",
    "# # #",
    "#  E#",
    "#####",
]

# Start on the border so off-grid moves can be tested
EDGE_MAZE = [
    "S    ",
    "#### ",
    "     ",
    " ####",
    "    E",
]


@pytest.fixture
def simple_lines() -> list[str]:
    """Rows of the 5x5 sample maze."""
    return list(SIMPLE_MAZE)


@pytest.fixture
def simple_grid() -> Grid:
    """Loaded 5x5 sample maze."""
    return load_maze_lines(SIMPLE_MAZE)


@pytest.fixture
def edge_grid() -> Grid:
    """Maze whose start sits in the top-left corner."""
    return load_maze_lines(EDGE_MAZE)


@pytest.fixture
def maze_file(tmp_path) -> Path:
    """Sample maze written to a temporary file."""
    path = tmp_path / "simple.txt"
    path.write_text("\n".join(SIMPLE_MAZE) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, marker="@", prompt="> ")
