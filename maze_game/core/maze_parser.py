"""
Maze Parser for the Maze Game.

Loads and validates maze files from the filesystem.

Maze Format:
    S = Start position (exactly one)
    E = Exit (exactly one)
    # = Wall (impassable)
      = Open path (space)

Both dimensions must lie between 5 and 100 and every row must have the
same length.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

MIN_SIZE = 5
MAX_SIZE = 100

LINE_BREAK = re.compile(r"\r\n|\r|\n")


class MazeError(Exception):
    """Base exception for the maze game."""

    pass


class InvalidMaze(MazeError):
    """Exception raised when a maze fails structural or content validation."""

    def __init__(
        self,
        reason: str,
        char: Optional[str] = None,
        path: Optional[Path | str] = None,
    ):
        self.reason = reason
        self.char = char
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        if self.char is not None:
            return f"{self.reason}: {self.char!r}"
        if self.path is not None:
            return f"{self.reason}: {self.path}"
        return self.reason


class CellType(Enum):
    """Types of cells in the maze."""

    WALL = "#"
    OPEN = " "
    START = "S"
    EXIT = "E"

    @classmethod
    def from_char(cls, char: str) -> Optional["CellType"]:
        """Convert character to CellType, None if the character is not a maze symbol."""
        try:
            return cls(char)
        except ValueError:
            return None


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return a new position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Grid:
    """Validated, immutable maze layout addressed by (x, y)."""

    cells: tuple[tuple[CellType, ...], ...]
    start: Position
    exit: Position

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> CellType:
        """Get cell type at position."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside the maze")
        return self.cells[y][x]

    def rows(self) -> list[str]:
        """Return the maze as its original text rows."""
        return ["".join(cell.value for cell in row) for row in self.cells]

    def to_dict(self) -> dict:
        """Get maze metadata."""
        return {
            "width": self.width,
            "height": self.height,
            "start_position": self.start.to_dict(),
            "exit_position": self.exit.to_dict(),
        }


def _check_dimensions(lines: Sequence[str]) -> int:
    """Validate height, width and rectangularity. Returns the width."""
    if not MIN_SIZE <= len(lines) <= MAX_SIZE:
        raise InvalidMaze("height out of range")

    width = len(lines[0])
    if not MIN_SIZE <= width <= MAX_SIZE:
        raise InvalidMaze("width out of range")

    for line in lines:
        if len(line) != width:
            raise InvalidMaze("non-rectangular")

    return width


def load_maze_lines(lines: Sequence[str]) -> Grid:
    """
    Parse maze rows into a validated Grid.

    Dimensions are checked first, then cells are scanned left-to-right,
    top-to-bottom. A missing start or exit is only reported after the
    whole grid has been scanned.

    Args:
        lines: Maze rows without line terminators.

    Returns:
        Grid with its start and exit positions.

    Raises:
        InvalidMaze: If the maze is invalid.
    """
    _check_dimensions(lines)

    start_pos: Optional[Position] = None
    exit_pos: Optional[Position] = None
    cells = []

    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            cell = CellType.from_char(char)
            if cell is None:
                raise InvalidMaze("invalid character", char=char)

            if cell is CellType.START:
                if start_pos is not None:
                    raise InvalidMaze("multiple starts")
                start_pos = Position(x, y)
            elif cell is CellType.EXIT:
                if exit_pos is not None:
                    raise InvalidMaze("multiple exits")
                exit_pos = Position(x, y)

            row.append(cell)
        cells.append(tuple(row))

    if start_pos is None:
        raise InvalidMaze("missing start")

    if exit_pos is None:
        raise InvalidMaze("missing exit")

    return Grid(cells=tuple(cells), start=start_pos, exit=exit_pos)


def split_rows(maze_text: str) -> list[str]:
    """Split file text into rows on line breaks only. A final line break ends the last row."""
    rows = LINE_BREAK.split(maze_text)
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def load_maze_file(file_path: Path | str) -> Grid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        Validated Grid.

    Raises:
        InvalidMaze: If the file is missing, unreadable, or the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        logger.warning(f"Maze file not found: {file_path}")
        raise InvalidMaze("file not found", path=file_path)

    if not file_path.is_file():
        raise InvalidMaze("unreadable file", path=file_path)

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read maze file {file_path}: {e}")
        raise InvalidMaze("unreadable file", path=file_path) from e

    try:
        grid = load_maze_lines(split_rows(maze_text))
    except InvalidMaze as e:
        logger.warning(f"Rejected maze {file_path}: {e}")
        raise

    logger.info(f"Loaded maze {file_path.name} ({grid.width}x{grid.height})")
    return grid


def validate_maze_lines(lines: Sequence[str]) -> tuple[bool, Optional[str]]:
    """
    Validate maze rows without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        load_maze_lines(lines)
        return True, None
    except InvalidMaze as e:
        return False, str(e)
