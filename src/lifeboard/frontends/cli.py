"""Command-line interface for stepping through Conway's Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from ..core.board import Board
from ..core.game import GameOfLife
from ..core.patterns import centered_origin, get_pattern, list_patterns


logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_PATTERN = "Acorn"
DEFAULT_PATTERN_X = 17
DEFAULT_PATTERN_Y = 19


class CLIGameOfLife:
    """Console frontend: shows each generation and waits for Enter."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        """Initialize CLI interface.

        Args:
            stdin: Stream read one line per generation (defaults to sys.stdin)
            stdout: Stream the boards are written to (defaults to sys.stdout)
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def build_game(self, width: int, height: int, pattern: Board, origin_x: int, origin_y: int) -> GameOfLife:
        """Create a game whose first generation is a pattern on an empty board.

        Args:
            width: Board width
            height: Board height
            pattern: Seed pattern to stamp
            origin_x: Column of the pattern's left edge
            origin_y: Row of the pattern's top edge

        Returns:
            New GameOfLife at generation 0
        """
        board = Board(width, height)
        board.stamp(origin_x, origin_y, pattern)
        logger.debug(
            "Stamped %dx%d pattern at (%d, %d) on %dx%d board",
            pattern.width,
            pattern.height,
            origin_x,
            origin_y,
            width,
            height,
        )
        return GameOfLife(board)

    def run(self, game: GameOfLife, max_generations: Optional[int] = None) -> None:
        """Print a board, wait for a line of input, step; repeat.

        Args:
            game: Game to advance
            max_generations: Stop after this many steps (None runs forever)

        Raises:
            EOFError: If input ends before the run is over
        """
        steps = 0
        while max_generations is None or steps < max_generations:
            self.stdout.write(game.board.render())
            self.stdout.write("\n")
            self.stdout.flush()

            # Content is ignored, the line only paces the simulation
            if not self.stdin.readline():
                raise EOFError(f"End of input at generation {game.generation}")

            game.step()
            steps += 1


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Step through Conway's Game of Life, one generation per Enter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Acorn on a 40x40 board, press Enter to advance
  lifeboard

  # Glider centered on a 20x20 board
  lifeboard -W 20 -H 20 --pattern Glider --center

  # List available patterns
  lifeboard --list-patterns
        """,
    )

    # Board configuration
    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Board width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Board height (default: {DEFAULT_HEIGHT})"
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        default=DEFAULT_PATTERN,
        help=f"Seed pattern to stamp on the empty board (default: {DEFAULT_PATTERN})",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=DEFAULT_PATTERN_X,
        help=f"X offset for pattern placement (default: {DEFAULT_PATTERN_X})",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=DEFAULT_PATTERN_Y,
        help=f"Y offset for pattern placement (default: {DEFAULT_PATTERN_Y})",
    )

    parser.add_argument(
        "--center",
        action="store_true",
        help="Center the pattern on the board, ignoring the offsets",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=None,
        help="Stop after this many generations (default: run until input ends)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found (available: {', '.join(list_patterns())})")

    if errors:
        logger.error("Invalid arguments:")
        for error in errors:
            logger.error("  - %s", error)
        return False

    return True


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout only carries boards."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    package_logger = logging.getLogger("lifeboard")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 when a bounded run completes, 1 otherwise)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.list_patterns:
        for name in list_patterns():
            pattern = get_pattern(name)
            print(f"{name}: {pattern.width}x{pattern.height}, {pattern.population} cells")
        return 0

    if not validate_args(args):
        return 1

    pattern = get_pattern(args.pattern)
    if args.center:
        origin_x, origin_y = centered_origin(args.width, args.height, pattern)
    else:
        origin_x, origin_y = args.pattern_x, args.pattern_y

    try:
        cli = CLIGameOfLife()
        game = cli.build_game(args.width, args.height, pattern, origin_x, origin_y)
        cli.run(game, args.max_generations)
        return 0

    except EOFError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.error("Simulation interrupted by user")
        return 1
    except AssertionError:
        # Broken invariant, not a user-facing error
        raise
    except Exception as e:
        logger.error("Error: %s", e)
        if args.verbose:
            logger.exception("Traceback")
        return 1


if __name__ == "__main__":
    sys.exit(main())
