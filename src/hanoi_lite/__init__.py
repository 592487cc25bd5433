# src/hanoi_lite/__init__.py
"""
Recursive Tower of Hanoi solver for three pegs.

The core is the peg storage, the single-disc mover and the recursive
transfer; rendering, run logging and the CLI sit on top of it.
"""

from .errors import (
    HanoiError, InvalidHeightError, InvalidArgumentError,
    PegInvariantError, StackUnderflowError, StackOverflowError,
)
from .pegs import PegStack, Board, MAX_HEIGHT, MIN_HEIGHT, ROWS, is_descending_layout
from .mover import MoveCounter, move_single_disc, select_auxiliary_row
from .solver import (
    MoveEvent, SolveContext, SolveResult, Puzzle,
    expected_moves, validate_height, transfer, solve,
)
from .render import render_state
from .logger import RunLogger
from .config import HanoiConfig

__all__ = [
    # Errors
    "HanoiError", "InvalidHeightError", "InvalidArgumentError",
    "PegInvariantError", "StackUnderflowError", "StackOverflowError",
    # Core
    "PegStack", "Board", "MAX_HEIGHT", "MIN_HEIGHT", "ROWS", "is_descending_layout",
    "MoveCounter", "move_single_disc", "select_auxiliary_row",
    "MoveEvent", "SolveContext", "SolveResult", "Puzzle",
    "expected_moves", "validate_height", "transfer", "solve",
    # Presentation / run records
    "render_state", "RunLogger", "HanoiConfig",
]
