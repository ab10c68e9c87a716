# Core module
from .maze_engine import (
    Command,
    CommandResult,
    GameSession,
    SessionClosed,
    SessionState,
    Signal,
)
from .maze_parser import (
    CellType,
    Grid,
    InvalidMaze,
    MazeError,
    Position,
    load_maze_file,
    load_maze_lines,
    validate_maze_lines,
)

__all__ = [
    "CellType",
    "Command",
    "CommandResult",
    "GameSession",
    "Grid",
    "InvalidMaze",
    "MazeError",
    "Position",
    "SessionClosed",
    "SessionState",
    "Signal",
    "load_maze_file",
    "load_maze_lines",
    "validate_maze_lines",
]
