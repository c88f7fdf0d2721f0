"""Core cellular automata logic."""

from .board import Board
from .game import GameOfLife
from .patterns import ACORN, get_pattern, list_patterns

__all__ = ["Board", "GameOfLife", "ACORN", "get_pattern", "list_patterns"]
