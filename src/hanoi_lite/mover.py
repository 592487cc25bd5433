# src/hanoi_lite/mover.py
"""Single-disc relocation and auxiliary-peg selection."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError
from .pegs import ROWS, Board


@dataclass
class MoveCounter:
    """Number of single-disc moves made by one solve."""
    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count


def _check_row(index: int, name: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < ROWS:
        raise InvalidArgumentError(f"{name} must be a peg index in <0; {ROWS - 1}> (got {index!r})")


def move_single_disc(board: Board, source: int, destination: int, counter: MoveCounter) -> int:
    """
    Move the top disc of ``source`` onto ``destination`` and count the move.

    The counter is incremented even when nothing changes hands: a self-move
    (``source == destination``) or an empty source still counts as one move.
    Neither happens in a correct transfer sequence.

    Returns the counter value after the move.
    """
    _check_row(source, "source")
    _check_row(destination, "destination")
    if source != destination and board[source].top_disc_size() is not None:
        board[destination].add_top(board[source].remove_top())
    return counter.increment()


def select_auxiliary_row(deny1: int, deny2: int) -> int:
    """
    Return the peg index that is neither ``deny1`` nor ``deny2``.

    Scans forward from the index after ``deny1``, wrapping around, and returns
    the first index that is not denied.
    """
    _check_row(deny1, "deny1")
    _check_row(deny2, "deny2")
    if deny1 == deny2:
        raise InvalidArgumentError(f"denied rows must differ (both are {deny1})")
    row = deny1
    while True:
        row = (row + 1) % ROWS
        if row != deny1 and row != deny2:
            return row
