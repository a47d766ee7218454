"""
Tests for rollout_games.games.board

Tests Pos arithmetic and the bounds-checked Board grid.
"""

import numpy as np
import pytest

from rollout_games.games.board import EMPTY, Board, Pos


class TestPos:
    """Pos value-type tests."""

    def test_addition(self):
        assert Pos(1, 2) + Pos(3, -1) == Pos(4, 1)

    def test_negation(self):
        assert -Pos(2, -3) == Pos(-2, 3)

    def test_subtraction(self):
        assert Pos(5, 5) - Pos(1, 2) == Pos(4, 3)

    def test_hashable_and_comparable_with_tuples(self):
        assert {Pos(1, 1): "a"}[Pos(1, 1)] == "a"
        assert Pos(3, 4) == (3, 4)


class TestBoardAccess:
    """get / try_get / set tests."""

    def test_new_board_is_empty(self):
        board = Board(4)
        assert all(cell == EMPTY for _, cell in board)

    def test_set_then_get(self):
        board = Board(4)
        board.set(Pos(1, 3), 2)
        assert board.get(Pos(1, 3)) == 2
        assert board.cells[3, 1] == 2  # row-major: cells[y, x]

    def test_try_get_off_board_is_none(self):
        """Off-board is None, distinct from an EMPTY cell."""
        board = Board(3)
        assert board.try_get(Pos(-1, 0)) is None
        assert board.try_get(Pos(0, 3)) is None
        assert board.try_get(Pos(2, 2)) == EMPTY

    @pytest.mark.parametrize("pos,expected", [
        (Pos(0, 0), True),
        (Pos(7, 7), True),
        (Pos(8, 0), False),
        (Pos(0, -1), False),
    ])
    def test_in_bounds(self, pos, expected):
        assert Board(8).in_bounds(pos) is expected

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError):
            Board(0)

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError):
            Board(3, cells=np.zeros((2, 3), dtype=np.int8))


class TestBoardIteration:
    """positions() / __iter__ tests."""

    def test_positions_row_major(self):
        assert list(Board(2).positions()) == [Pos(0, 0), Pos(1, 0), Pos(0, 1), Pos(1, 1)]

    def test_iter_yields_values(self):
        board = Board(2)
        board.set(Pos(1, 0), 5)
        assert list(board) == [(Pos(0, 0), 0), (Pos(1, 0), 5), (Pos(0, 1), 0), (Pos(1, 1), 0)]


class TestBoardCopy:
    """Copies share nothing."""

    def test_copy_independent(self):
        board = Board(3)
        clone = board.copy()
        clone.set(Pos(1, 1), 1)
        assert board.get(Pos(1, 1)) == EMPTY
        assert clone.get(Pos(1, 1)) == 1

    def test_copy_equal(self):
        board = Board(3, fill=2)
        assert board.copy() == board
