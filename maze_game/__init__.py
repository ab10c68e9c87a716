"""Maze Game - text-based maze navigation."""

__version__ = "1.0.0"
