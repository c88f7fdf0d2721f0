"""Conway's Game of Life on a bounded board, stepped from the console."""

__version__ = "0.1.0"

from .core.board import Board
from .core.game import GameOfLife
from .core.patterns import ACORN, get_pattern, list_patterns

__all__ = ["Board", "GameOfLife", "ACORN", "get_pattern", "list_patterns"]
