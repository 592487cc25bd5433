import json
from typing import List, Dict, Any, Optional

from .solver import MoveEvent


class RunLogger:
    """
    Collects one frame per solver event for replay/visualization.

    Frame schema:
      {
        "type": "snapshot",
        "note": str,            # event kind: transfer / trivial / bottom
        "call": int,            # 1-based transfer call number
        "moves": int,           # move counter after the event
        "move": [src, dst],
        "count": int,           # discs in the transfer
        "pegs": [[...], [...], [...]]   # bottom-to-top
      }
    """

    def __init__(self, kinds: Optional[List[str]] = None):
        self.events: List[Dict[str, Any]] = []
        self.kinds = set(kinds) if kinds is not None else None

    def observe(self, event: MoveEvent):
        if self.kinds is not None and event.kind not in self.kinds:
            return
        self.events.append({
            "type": "snapshot",
            "note": event.kind,
            "call": event.call,
            "moves": event.moves,
            "move": [event.source, event.destination],
            "count": event.count,
            "pegs": [list(peg) for peg in event.layout],
        })

    __call__ = observe

    def snapshot(self, layout, note: str = "", moves: int = 0):
        """Record a board state outside of a solve (e.g. initial/final)."""
        self.events.append({
            "type": "snapshot",
            "note": note,
            "moves": moves,
            "pegs": [list(peg) for peg in layout],
        })

    def frames_of(self, kind: str) -> List[Dict[str, Any]]:
        return [f for f in self.events if f["note"] == kind]

    def to_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.events, f, indent=2)
