"""Common Conway's Game of Life seed patterns."""

from typing import Dict, List, Optional, Tuple

from .board import Board


# Methuselah that grows for 5206 generations before it stabilizes
ACORN = Board.parse(
    """
    _X_____
    ___X___
    XX__XXX
    """,
    frozen=True,
)

_PATTERNS: Dict[str, Board] = {
    # Still life
    "Block": Board.parse(
        """
        XX
        XX
        """,
        frozen=True,
    ),
    # Period-2 oscillator
    "Blinker": Board.parse("XXX", frozen=True),
    # Smallest spaceship, period-4
    "Glider": Board.parse(
        """
        _X_
        __X
        XXX
        """,
        frozen=True,
    ),
    # Methuselahs
    "R-pentomino": Board.parse(
        """
        _XX
        XX_
        _X_
        """,
        frozen=True,
    ),
    "Diehard": Board.parse(
        """
        ______X_
        XX______
        _X___XXX
        """,
        frozen=True,
    ),
    "Acorn": ACORN,
}


def get_pattern(name: str) -> Optional[Board]:
    """Get a preset pattern by name.

    Args:
        name: Pattern name, case-insensitive

    Returns:
        Read-only Board or None if not found
    """
    for pattern_name, pattern in _PATTERNS.items():
        if pattern_name.lower() == name.lower():
            return pattern
    return None


def list_patterns() -> List[str]:
    """Get list of all pattern names."""
    return list(_PATTERNS.keys())


def centered_origin(width: int, height: int, pattern: Board) -> Tuple[int, int]:
    """Get the stamping origin that centers a pattern on a board.

    Args:
        width: Destination board width
        height: Destination board height
        pattern: Pattern to be stamped

    Returns:
        Tuple of (origin_x, origin_y), negative when the pattern is larger
    """
    return ((width - pattern.width) // 2, (height - pattern.height) // 2)
