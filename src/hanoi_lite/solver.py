# src/hanoi_lite/solver.py
"""
Recursive three-peg solver.

A transfer of ``count`` discs from ``source`` to ``destination`` is:
  1. move the ``count - 1`` discs above the bottom one onto the auxiliary peg
  2. move the bottom disc straight to ``destination``
  3. move the ``count - 1`` discs from the auxiliary peg onto it

Recursion depth equals ``count``, which is capped by the peg capacity.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import InvalidArgumentError, InvalidHeightError
from .mover import MoveCounter, move_single_disc, select_auxiliary_row
from .pegs import MAX_HEIGHT, MIN_HEIGHT, ROWS, Board, Layout, is_descending_layout

# Event kinds passed to observers
TRANSFER = "transfer"   # a transfer call was entered
TRIVIAL = "trivial"     # single-disc transfer finished
BOTTOM = "bottom"       # bottom disc of a sub-tower moved


@dataclass(frozen=True)
class MoveEvent:
    kind: str
    source: int
    destination: int
    count: int
    call: int
    moves: int
    layout: Layout


Observer = Callable[[MoveEvent], None]


@dataclass
class SolveContext:
    """State threaded through one solve: the board, its counters and the observer."""
    board: Board
    moves: MoveCounter = field(default_factory=MoveCounter)
    observer: Optional[Observer] = None
    calls: int = 0

    def emit(self, kind: str, source: int, destination: int, count: int) -> None:
        if self.observer is None:
            return
        self.observer(MoveEvent(
            kind=kind,
            source=source,
            destination=destination,
            count=count,
            call=self.calls,
            moves=self.moves.count,
            layout=self.board.snapshot(),
        ))


@dataclass(frozen=True)
class SolveResult:
    height: int
    moves: int
    layout: Layout
    destination: int = ROWS - 1

    @property
    def expected_moves(self) -> int:
        return expected_moves(self.height)

    @property
    def is_goal(self) -> bool:
        """All discs descending on the destination peg, the other pegs empty."""
        for index, peg in enumerate(self.layout):
            if index == self.destination:
                if peg != tuple(range(self.height, 0, -1)):
                    return False
            elif peg:
                return False
        return True


def expected_moves(height: int) -> int:
    return (1 << height) - 1


def validate_height(height, max_height: int = MAX_HEIGHT) -> int:
    """Return ``height`` if it is an integer in <MIN_HEIGHT; max_height>, else raise."""
    if isinstance(max_height, bool) or not isinstance(max_height, int):
        raise InvalidArgumentError(f"max_height must be an integer (got {max_height!r})")
    if max_height > MAX_HEIGHT:
        raise InvalidArgumentError(f"max_height may not exceed peg capacity {MAX_HEIGHT}")
    if isinstance(height, bool) or not isinstance(height, int):
        raise InvalidHeightError(height, MIN_HEIGHT, max_height)
    if height < MIN_HEIGHT or height > max_height:
        raise InvalidHeightError(height, MIN_HEIGHT, max_height)
    return height


def transfer(ctx: SolveContext, source: int, destination: int, count: int) -> None:
    """Move ``count`` discs, stacked descending on ``source``, onto ``destination``."""
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError(f"disc count must be a positive integer (got {count!r})")

    ctx.calls += 1
    ctx.emit(TRANSFER, source, destination, count)

    if count == 1:
        move_single_disc(ctx.board, source, destination, ctx.moves)
        ctx.emit(TRIVIAL, source, destination, count)
        return

    auxiliary = select_auxiliary_row(source, destination)
    transfer(ctx, source, auxiliary, count - 1)
    move_single_disc(ctx.board, source, destination, ctx.moves)
    ctx.emit(BOTTOM, source, destination, count)
    transfer(ctx, auxiliary, destination, count - 1)


class Puzzle:
    """
    One puzzle instance: a validated height, its board and its move counter.

    Each instance owns its own state, so independent puzzles never share
    counters or pegs.
    """

    def __init__(self, height: int, observer: Optional[Observer] = None, max_height: int = MAX_HEIGHT):
        self.height = validate_height(height, max_height)
        self.board = Board.tower(self.height)
        self.ctx = SolveContext(self.board, observer=observer)
        self.started = False

    @property
    def moves(self) -> int:
        return self.ctx.moves.count

    def snapshot(self) -> Layout:
        return self.board.snapshot()

    def solve(self, source: int = 0, destination: int = ROWS - 1) -> SolveResult:
        if self.started:
            raise InvalidArgumentError("puzzle has already been solved or attempted")
        if source != 0:
            raise InvalidArgumentError(f"the tower starts on peg 0, not {source}")
        if destination not in range(1, ROWS):
            raise InvalidArgumentError(f"destination must be peg 1 or 2 (got {destination!r})")
        # A failed attempt leaves the board half-moved, so there is no second try.
        self.started = True
        self.ctx.moves.count = 0
        transfer(self.ctx, source, destination, self.height)
        layout = self.snapshot()
        assert is_descending_layout(layout), f"illegal final layout {layout}"
        return SolveResult(self.height, self.moves, layout, destination)


def solve(height: int, observer: Optional[Observer] = None) -> SolveResult:
    """Validate ``height`` and solve a fresh puzzle from peg 0 to peg 2."""
    return Puzzle(height, observer=observer).solve()
