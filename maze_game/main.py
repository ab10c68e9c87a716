"""Maze Game - console entry point."""

import logging
import sys
from typing import Optional, Sequence, TextIO

from maze_game.config import Settings, get_settings
from maze_game.core.maze_engine import USAGE_HINT, GameSession, Signal
from maze_game.core.maze_parser import InvalidMaze, load_maze_file

logger = logging.getLogger("maze_game")


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with game output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def play(
    session: GameSession,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = "",
) -> None:
    """
    Run the read/print loop until the session ends.

    End of input is treated as a quit request.
    """
    while not session.is_terminal:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            line = "q"

        result = session.handle_input(line)

        if result.signal is Signal.SHOW_MAP:
            print(f"Current map ({session.marker} marks your position):", file=stdout)
            print(result.rendering, file=stdout)
        elif result.message:
            print(result.message, file=stdout)


def run(
    argv: Sequence[str],
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    settings: Optional[Settings] = None,
) -> int:
    """
    Load the maze named on the command line and play it.

    Args:
        argv: Command-line arguments, without the program name.
        stdin: Source of player commands.
        stdout: Destination for game output.
        stderr: Destination for error messages.
        settings: Optional settings override.

    Returns:
        Process exit status.
    """
    settings = settings or get_settings()

    if argv:
        maze_path = argv[0]
    elif settings.default_maze is not None:
        maze_path = str(settings.default_maze)
    else:
        print("Error: please provide a maze file", file=stderr)
        return 1

    try:
        grid = load_maze_file(maze_path)
    except InvalidMaze as e:
        print(f"Error: {e}", file=stderr)
        return 1

    logger.info(f"Starting game on {maze_path}")
    session = GameSession(grid, marker=settings.marker)

    print(f"Welcome to {settings.app_name}!", file=stdout)
    print(USAGE_HINT, file=stdout)
    play(session, stdin, stdout, prompt=settings.prompt)

    logger.info(
        f"Game ended ({session.state.value}) after {session.move_count} moves"
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdin, sys.stdout, sys.stderr, settings=settings)


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
