"""Tests for peg storage and the three-peg board."""

import pytest
from hanoi_lite.pegs import PegStack, Board, MAX_HEIGHT, is_descending_layout
from hanoi_lite.errors import StackUnderflowError, StackOverflowError, PegInvariantError


class TestPegStack:
    """Push/pop behaviour of a single peg."""

    def test_empty_peg_has_no_top(self):
        peg = PegStack()

        assert peg.top_disc_size() is None
        assert len(peg) == 0
        assert peg.discs() == ()

    def test_add_and_remove_are_lifo(self):
        peg = PegStack()
        for disc in (3, 2, 1):
            peg.add_top(disc)

        assert peg.discs() == (3, 2, 1)
        assert peg.top_disc_size() == 1
        assert peg.remove_top() == 1
        assert peg.remove_top() == 2
        assert peg.discs() == (3,)

    def test_remove_from_empty_raises_underflow(self):
        peg = PegStack()

        with pytest.raises(StackUnderflowError):
            peg.remove_top()

    def test_add_past_capacity_raises_overflow(self):
        peg = PegStack(capacity=2)
        peg.add_top(2)
        peg.add_top(1)

        with pytest.raises(StackOverflowError):
            peg.add_top(0)
        assert peg.discs() == (2, 1)

    def test_invariant_errors_share_a_base(self):
        assert issubclass(StackUnderflowError, PegInvariantError)
        assert issubclass(StackOverflowError, PegInvariantError)

    def test_ordering_is_not_enforced(self):
        """Legality is the solver's job; the peg stores whatever it is given."""
        peg = PegStack()
        peg.add_top(1)
        peg.add_top(5)

        assert peg.discs() == (1, 5)
        assert not peg.is_descending()

    def test_default_capacity_holds_max_height(self):
        peg = PegStack()
        for disc in range(MAX_HEIGHT, 0, -1):
            peg.add_top(disc)

        assert len(peg) == MAX_HEIGHT
        assert peg.is_descending()


class TestBoard:
    """Initial tower and snapshots."""

    def test_tower_fills_first_peg(self):
        board = Board.tower(4)

        assert board.snapshot() == ((4, 3, 2, 1), (), ())
        assert board.disc_count() == 4
        assert board.tallest_disc() == 4
        assert board.is_legal()

    def test_snapshot_is_idempotent(self):
        board = Board.tower(3)

        assert board.snapshot() == board.snapshot()

    def test_snapshot_is_detached_from_board(self):
        board = Board.tower(3)
        before = board.snapshot()
        board[1].add_top(board[0].remove_top())

        assert before == ((3, 2, 1), (), ())
        assert board.snapshot() == ((3, 2), (1,), ())

    def test_empty_board(self):
        board = Board()

        assert len(board) == 3
        assert board.tallest_disc() == 0
        assert board.snapshot() == ((), (), ())


def test_is_descending_layout():
    assert is_descending_layout(((3, 2, 1), (), (5,)))
    assert not is_descending_layout(((3, 2, 1), (1, 2), ()))
    assert not is_descending_layout(((2, 2), (), ()))
