"""Tests for the preset patterns."""

import pytest
from lifeboard.core.board import Board
from lifeboard.core.game import GameOfLife
from lifeboard.core.patterns import ACORN, centered_origin, get_pattern, list_patterns


class TestAcorn:
    """Test cases for the Acorn seed."""

    def test_shape(self):
        """Test the Acorn dimensions and population."""
        assert ACORN.shape == (7, 3)
        assert ACORN.population == 7

    def test_cells(self):
        """Test the Acorn cell layout."""
        assert ACORN.render() == "_X_____\n___X___\nXX__XXX\n"

    def test_read_only(self):
        """Test that the Acorn cannot be modified."""
        assert ACORN.frozen
        with pytest.raises(ValueError):
            ACORN.set(0, 0, True)
        assert ACORN.get(0, 0) is False

    def test_default_placement(self):
        """Test stamping the Acorn at (17, 19) on a 40x40 board."""
        board = Board(40, 40)
        board.stamp(17, 19, ACORN)

        alive = {(x, y) for y in range(40) for x in range(40) if board.get(x, y)}
        assert alive == {(18, 19), (20, 20), (17, 21), (18, 21), (21, 21), (22, 21), (23, 21)}

    def test_evolves(self):
        """Test that the Acorn keeps evolving early on."""
        board = Board(40, 40)
        board.stamp(17, 19, ACORN)
        game = GameOfLife(board)

        for _ in range(10):
            game.step()

        assert game.population > 0
        assert game.board != board


class TestPatternLookup:
    """Test cases for looking up patterns."""

    def test_list_patterns(self):
        """Test the list of available patterns."""
        patterns = list_patterns()
        assert "Acorn" in patterns
        assert "Glider" in patterns
        assert "Block" in patterns
        assert len(patterns) == len(set(patterns))

    def test_get_pattern(self):
        """Test retrieving a pattern by name."""
        assert get_pattern("Acorn") is ACORN

        blinker = get_pattern("Blinker")
        assert blinker is not None
        assert blinker.shape == (3, 1)
        assert blinker.population == 3

    def test_get_pattern_case_insensitive(self):
        """Test that lookups ignore case."""
        assert get_pattern("acorn") is ACORN
        assert get_pattern("r-PENTOMINO") is get_pattern("R-pentomino")

    def test_get_unknown_pattern(self):
        """Test that unknown names return None."""
        assert get_pattern("NonExistentPattern") is None

    def test_all_patterns_frozen(self):
        """Test that every preset is read-only and non-empty."""
        for name in list_patterns():
            pattern = get_pattern(name)
            assert pattern.frozen
            assert pattern.population > 0

    def test_block_is_still_life(self):
        """Test that the Block preset survives unchanged."""
        board = Board(6, 6)
        board.stamp(2, 2, get_pattern("Block"))

        assert board.next_generation() == board

    def test_diehard_population(self):
        """Test the Diehard preset layout."""
        diehard = get_pattern("Diehard")
        assert diehard.shape == (8, 3)
        assert diehard.population == 7


class TestCenteredOrigin:
    """Test cases for centering a pattern."""

    def test_acorn_on_default_board(self):
        """Test centering the Acorn on a 40x40 board."""
        assert centered_origin(40, 40, ACORN) == (16, 18)

    def test_pattern_larger_than_board(self):
        """Test that an oversized pattern gets a negative origin."""
        assert centered_origin(3, 3, ACORN) == (-2, 0)
