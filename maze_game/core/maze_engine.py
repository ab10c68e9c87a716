"""
Maze Game Engine

Core maze navigation logic including:
- Command interpretation (WASD, map, quit)
- Move validation against walls and grid bounds
- Exit detection
- Map rendering with the player marker

The engine never reads input or prints output. Callers feed it commands
and display the returned results.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .maze_parser import CellType, Grid, MazeError, Position

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "X"
USAGE_HINT = "Use WASD to move, M to show the map, Q to quit"


class SessionClosed(MazeError):
    """Raised when a command is applied to a session that has already ended."""

    pass


class SessionState(Enum):
    """Lifecycle states of a game session."""

    ACTIVE = "active"
    WON = "won"
    QUIT = "quit"


class Signal(Enum):
    """Feedback emitted by a command."""

    MOVED = "moved"
    BLOCKED = "blocked"
    SHOW_MAP = "show_map"
    INVALID_INPUT = "invalid_input"
    QUIT = "quit"


class Command(Enum):
    """Player commands."""

    MOVE_UP = "w"
    MOVE_LEFT = "a"
    MOVE_DOWN = "s"
    MOVE_RIGHT = "d"
    SHOW_MAP = "m"
    QUIT = "q"
    UNRECOGNIZED = ""

    @classmethod
    def from_input(cls, raw: str) -> "Command":
        """Convert a line of user input to a Command (case-insensitive)."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def delta(self) -> Optional[tuple[int, int]]:
        """Get (dx, dy) for movement commands, None otherwise."""
        deltas = {
            Command.MOVE_UP: (0, -1),
            Command.MOVE_DOWN: (0, 1),
            Command.MOVE_LEFT: (-1, 0),
            Command.MOVE_RIGHT: (1, 0),
        }
        return deltas.get(self)


@dataclass
class CommandResult:
    """Result of applying a command."""

    signal: Signal
    state: SessionState
    position: Position
    message: Optional[str] = None
    rendering: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.state is not SessionState.ACTIVE

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "signal": self.signal.value,
            "state": self.state.value,
            "position": self.position.to_dict(),
        }
        if self.message:
            result["message"] = self.message
        if self.rendering is not None:
            result["rendering"] = self.rendering
        return result


class GameSession:
    """
    A single play-through of a loaded maze.

    Example usage:
        grid = load_maze_file("mazes/reg_5x5.txt")
        session = GameSession(grid)

        result = session.apply_command(Command.MOVE_RIGHT)
        if result.state is SessionState.WON:
            ...
    """

    def __init__(self, grid: Grid, marker: str = DEFAULT_MARKER):
        """
        Initialize a session at the grid's start position.

        Args:
            grid: Validated maze grid.
            marker: Symbol drawn at the player position when rendering.
        """
        self.grid = grid
        self.marker = marker
        self._position = grid.start
        self._state = SessionState.ACTIVE
        self._move_count = 0

    @property
    def position(self) -> Position:
        return self._position

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state is not SessionState.ACTIVE

    @property
    def move_count(self) -> int:
        """Number of successful moves so far."""
        return self._move_count

    def is_valid_move(self, target: Position) -> bool:
        """Check that target is inside the grid and not a wall."""
        if not self.grid.in_bounds(target.x, target.y):
            return False
        return self.grid.cell(target.x, target.y) is not CellType.WALL

    def apply_command(self, command: Command) -> CommandResult:
        """
        Apply one command to the session.

        Args:
            command: Command to apply.

        Returns:
            CommandResult with the emitted signal and resulting state.

        Raises:
            SessionClosed: If the session already reached a terminal state.
        """
        if self.is_terminal:
            raise SessionClosed(f"Session already ended ({self._state.value})")

        if command is Command.QUIT:
            self._state = SessionState.QUIT
            logger.info("Player quit the game")
            return self._result(Signal.QUIT, "Goodbye!")

        if command is Command.SHOW_MAP:
            return self._result(Signal.SHOW_MAP, rendering=self.render())

        if command.delta is None:
            return self._result(Signal.INVALID_INPUT, f"Invalid input. {USAGE_HINT}")

        return self._move(*command.delta)

    def handle_input(self, raw: str) -> CommandResult:
        """Parse a line of user input and apply it."""
        command = Command.from_input(raw)
        if command is Command.UNRECOGNIZED:
            if self.is_terminal:
                raise SessionClosed(f"Session already ended ({self._state.value})")
            return self._result(
                Signal.INVALID_INPUT,
                f"Invalid input '{raw.strip()}'. {USAGE_HINT}",
            )
        return self.apply_command(command)

    def render(self) -> str:
        """Draw the grid with the marker at the current position."""
        lines = []
        for y, row in enumerate(self.grid.rows()):
            if y == self._position.y:
                x = self._position.x
                row = row[:x] + self.marker + row[x + 1:]
            lines.append(row)
        return "\n".join(lines)

    def _move(self, dx: int, dy: int) -> CommandResult:
        target = self._position.offset(dx, dy)

        if self.is_valid_move(target):
            self._position = target
            self._move_count += 1
            signal, message = Signal.MOVED, "Moved"
            logger.debug(f"Moved to ({target.x}, {target.y})")
        else:
            signal, message = Signal.BLOCKED, "Cannot move there"
            logger.debug(f"Blocked moving to ({target.x}, {target.y})")

        # Check for exit after every movement command, blocked or not
        if self.grid.cell(self._position.x, self._position.y) is CellType.EXIT:
            self._state = SessionState.WON
            logger.info(f"Exit reached after {self._move_count} moves")
            message = f"{message}\nCongratulations! You escaped the maze!"

        return self._result(signal, message)

    def _result(
        self,
        signal: Signal,
        message: Optional[str] = None,
        rendering: Optional[str] = None,
    ) -> CommandResult:
        return CommandResult(
            signal=signal,
            state=self._state,
            position=self._position,
            message=message,
            rendering=rendering,
        )
