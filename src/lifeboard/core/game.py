"""Conway's Game of Life simulation engine."""

import logging

from .board import Board


logger = logging.getLogger(__name__)


class GameOfLife:
    """Owns the current board and advances it one generation at a time.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: The starting generation; the game takes ownership of it
        """
        self.board = board
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        # The previous board is dropped once its successor exists
        self.board = self.board.next_generation()
        self._generation += 1

        logger.debug("Generation %d: population %d", self._generation, self.population)
