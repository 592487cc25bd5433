# src/hanoi_lite/errors.py
"""Error types raised by the Hanoi core."""


class HanoiError(Exception):
    """Base class for every error raised by hanoi_lite."""


class InvalidHeightError(HanoiError, ValueError):
    """Tower height outside the supported range."""

    def __init__(self, height, min_height: int, max_height: int):
        self.height = height
        self.min_height = min_height
        self.max_height = max_height
        super().__init__(
            f"height must be in <{min_height}; {max_height}> (got {height!r})"
        )


class InvalidArgumentError(HanoiError, ValueError):
    """Bad argument passed straight to the solver or mover."""


class PegInvariantError(HanoiError, RuntimeError):
    """
    A peg was used in a way a correct move sequence never produces.

    These indicate a programming defect. The board is already corrupt when one
    is raised, so callers should let it propagate.
    """


class StackUnderflowError(PegInvariantError):
    """Disc removed from an empty peg."""


class StackOverflowError(PegInvariantError):
    """Disc added to a peg that is already at capacity."""
