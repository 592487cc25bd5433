"""Tests for single-disc moves and auxiliary peg selection."""

import itertools

import pytest
from hanoi_lite.mover import MoveCounter, move_single_disc, select_auxiliary_row
from hanoi_lite.pegs import Board
from hanoi_lite.errors import InvalidArgumentError


class TestMoveSingleDisc:

    def test_moves_top_disc_and_counts(self):
        board = Board.tower(3)
        counter = MoveCounter()

        assert move_single_disc(board, 0, 2, counter) == 1
        assert board.snapshot() == ((3, 2), (), (1,))
        assert counter.count == 1

    def test_self_move_still_counts(self):
        board = Board.tower(2)
        counter = MoveCounter()

        move_single_disc(board, 0, 0, counter)

        assert board.snapshot() == ((2, 1), (), ())
        assert counter.count == 1

    def test_empty_source_still_counts(self):
        board = Board.tower(2)
        counter = MoveCounter()

        move_single_disc(board, 1, 2, counter)

        assert board.snapshot() == ((2, 1), (), ())
        assert counter.count == 1

    def test_bad_peg_index(self):
        with pytest.raises(InvalidArgumentError):
            move_single_disc(Board.tower(2), 0, 3, MoveCounter())


class TestSelectAuxiliaryRow:

    def test_examples(self):
        assert select_auxiliary_row(0, 2) == 1
        assert select_auxiliary_row(1, 0) == 2

    @pytest.mark.parametrize("a,b", list(itertools.permutations(range(3), 2)))
    def test_returns_the_third_peg(self, a, b):
        assert select_auxiliary_row(a, b) == ({0, 1, 2} - {a, b}).pop()

    @pytest.mark.parametrize("a", [0, 1, 2])
    def test_equal_denials_rejected(self, a):
        with pytest.raises(InvalidArgumentError):
            select_auxiliary_row(a, a)

    def test_out_of_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            select_auxiliary_row(0, 5)
