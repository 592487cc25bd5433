# src/hanoi_lite/render.py
"""Text rendering of a board layout, tallest row first."""
from __future__ import annotations

from typing import List

from .pegs import Layout


def render_state(layout: Layout) -> str:
    """
    Render pegs side by side, one column per peg.

    The number of rows is the size of the largest disc on the board, so the
    picture keeps the same height for the whole run. Empty slots print as 0.
    """
    height = max((max(peg) for peg in layout if peg), default=0)
    lines: List[str] = [""]
    for level in range(height - 1, -1, -1):
        lines.append("".join(
            f"    {peg[level] if level < len(peg) else 0:3d}" for peg in layout
        ))
    lines.append("    ===" * len(layout))
    lines.append("")
    return "\n".join(lines) + "\n"
