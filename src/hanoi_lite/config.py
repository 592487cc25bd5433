# src/hanoi_lite/config.py
"""Run configuration, loadable from YAML."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .pegs import MAX_HEIGHT


@dataclass
class HanoiConfig:
    """Settings for one command-line run."""
    height: int = 3
    max_height: int = MAX_HEIGHT   # Cannot exceed peg capacity
    narrate: bool = True           # Print every transfer call and disc move
    log_json: Optional[str] = None  # Where to write RunLogger frames

    def as_dict(self) -> Dict[str, Any]:
        return {
            "height": self.height,
            "max_height": self.max_height,
            "narrate": self.narrate,
            "log_json": self.log_json,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HanoiConfig":
        unknown = set(d) - {"height", "max_height", "narrate", "log_json"}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        height = d.get("height", 3)
        max_height = d.get("max_height", MAX_HEIGHT)
        narrate = d.get("narrate", True)
        log_json = d.get("log_json")
        for key, value in (("height", height), ("max_height", max_height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Config key {key!r} must be an integer, got {value!r}")
        if not isinstance(narrate, bool):
            raise ValueError(f"Config key 'narrate' must be true or false, got {narrate!r}")
        if log_json is not None and not isinstance(log_json, str):
            raise ValueError(f"Config key 'log_json' must be a path, got {log_json!r}")
        return cls(height=height, max_height=max_height, narrate=narrate, log_json=log_json)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "HanoiConfig":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")
        return cls.from_dict(data)
