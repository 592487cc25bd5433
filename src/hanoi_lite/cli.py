"""CLI runner for the Tower of Hanoi solver."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import HanoiConfig
from .errors import InvalidArgumentError, InvalidHeightError
from .logger import RunLogger
from .render import render_state
from .solver import BOTTOM, TRANSFER, TRIVIAL, MoveEvent, Puzzle


def narrate(event: MoveEvent) -> None:
    if event.kind == TRANSFER:
        print(f"move({event.source}, {event.destination}, {event.count}) call #{event.call}")
        return
    print(f"moveDisc() #{event.moves}")
    if event.kind == TRIVIAL:
        print("Trivial case", end="")
    elif event.kind == BOTTOM:
        print("Bottom disc moved (trivial case)", end="")
    print(render_state(event.layout), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hanoi-lite", description="Solve the Tower of Hanoi recursively.")
    parser.add_argument("height", type=int, nargs="?", help="Number of discs on the initial tower")
    parser.add_argument("--config", help="YAML file with height/max_height/narrate/log_json")
    parser.add_argument("--quiet", action="store_true", help="Only print the initial and final state")
    parser.add_argument("--log-json", help="Write one JSON frame per solver event to this path")
    return parser


def load_config(args: argparse.Namespace) -> HanoiConfig:
    config = HanoiConfig.from_yaml(args.config) if args.config else HanoiConfig()
    if args.height is not None:
        config.height = args.height
    if args.quiet:
        config.narrate = False
    if args.log_json:
        config.log_json = args.log_json
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.height is None and args.config is None:
        parser.error("the following arguments are required: height")

    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger = RunLogger() if config.log_json else None

    def observe(event: MoveEvent) -> None:
        if config.narrate:
            narrate(event)
        if logger is not None:
            logger.observe(event)

    try:
        puzzle = Puzzle(config.height, observer=observe, max_height=config.max_height)
    except (InvalidHeightError, InvalidArgumentError) as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return 1

    print("Initial state:" + render_state(puzzle.snapshot()), end="")
    if logger is not None:
        logger.snapshot(puzzle.snapshot(), note="initial")

    result = puzzle.solve()

    print(f"Final state in {result.moves} moves:" + render_state(result.layout), end="")
    if logger is not None:
        logger.snapshot(result.layout, note="final", moves=result.moves)
        try:
            logger.to_json(config.log_json)
        except OSError as exc:
            print(f"Error: cannot write run log: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
