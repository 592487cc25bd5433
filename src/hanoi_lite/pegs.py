# src/hanoi_lite/pegs.py
"""Peg storage for the three-peg puzzle."""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidArgumentError, StackOverflowError, StackUnderflowError

MAX_HEIGHT = 100   # Peg capacity, also the tallest tower we accept
MIN_HEIGHT = 2
ROWS = 3

Layout = Tuple[Tuple[int, ...], ...]


class PegStack:
    """
    One peg: discs stored bottom-to-top in a fixed-size array.

    ``top`` is the slot the next disc would land in, so it doubles as the number
    of discs on the peg. Ordering between discs is not checked here; the solver
    keeps every peg descending by construction.
    """

    def __init__(self, capacity: int = MAX_HEIGHT):
        if capacity <= 0 or capacity > 255:
            raise InvalidArgumentError(f"peg capacity must be in <1; 255> (got {capacity})")
        self.capacity = capacity
        self.array = np.zeros(capacity, dtype=np.uint8)
        self.top = 0

    def __len__(self) -> int:
        return self.top

    def __repr__(self) -> str:
        return f"PegStack({list(self.discs())})"

    def top_disc_size(self) -> Optional[int]:
        if self.top == 0:
            return None
        return int(self.array[self.top - 1])

    def remove_top(self) -> int:
        if self.top == 0:
            raise StackUnderflowError("cannot remove a disc from an empty peg")
        self.top -= 1
        disc = int(self.array[self.top])
        self.array[self.top] = 0
        return disc

    def add_top(self, size: int) -> None:
        if self.top >= self.capacity:
            raise StackOverflowError(f"peg is full ({self.capacity} discs)")
        self.array[self.top] = size
        self.top += 1

    def discs(self) -> Tuple[int, ...]:
        """Bottom-to-top disc sizes currently on the peg."""
        return tuple(int(d) for d in self.array[: self.top])

    def is_descending(self) -> bool:
        present = self.array[: self.top].astype(np.int16)
        return bool(np.all(np.diff(present) < 0))


class Board:
    """The three pegs of one puzzle instance."""

    def __init__(self, capacity: int = MAX_HEIGHT):
        self.pegs: List[PegStack] = [PegStack(capacity) for _ in range(ROWS)]

    @classmethod
    def tower(cls, height: int, capacity: int = MAX_HEIGHT) -> "Board":
        """Board with ``height, height-1, ..., 1`` stacked on peg 0."""
        board = cls(capacity)
        for disc in range(height, 0, -1):
            board.pegs[0].add_top(disc)
        return board

    def __getitem__(self, index: int) -> PegStack:
        return self.pegs[index]

    def __iter__(self) -> Iterator[PegStack]:
        return iter(self.pegs)

    def __len__(self) -> int:
        return len(self.pegs)

    def snapshot(self) -> Layout:
        return tuple(peg.discs() for peg in self.pegs)

    def disc_count(self) -> int:
        return sum(len(peg) for peg in self.pegs)

    def tallest_disc(self) -> int:
        return max((int(peg.array.max()) for peg in self.pegs), default=0)

    def is_legal(self) -> bool:
        return all(peg.is_descending() for peg in self.pegs)


def is_descending_layout(layout: Layout) -> bool:
    """True iff every peg in ``layout`` is strictly descending bottom-to-top."""
    return all(
        all(lower > upper for lower, upper in zip(peg, peg[1:]))
        for peg in layout
    )
