"""CLI entrypoint for the Square-1 scramble generator."""

from __future__ import annotations

import argparse
import json
from datetime import datetime
from pathlib import Path

import numpy as np
import yaml
from tqdm import tqdm

from .engine import SCRAMBLE_LENGTH, SquareOneEngine
from .notation import format_scramble, format_twist
from .state_codec import StateValidationError


def load_config(path: str | Path) -> dict:
    """Load YAML config. Returns the ``scramble`` section."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise StateValidationError(f"Config {path} must contain a mapping")
    section = data.get("scramble", {}) or {}
    if not isinstance(section, dict):
        raise StateValidationError(f"Config {path}: 'scramble' must be a mapping")
    return section


def _log(message: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}", flush=True)


def build_parser(defaults: dict | None = None) -> argparse.ArgumentParser:
    d = defaults or {}
    p = argparse.ArgumentParser(description="Square-1 scramble generator")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config (scramble section)")
    p.add_argument("--count", type=int, default=d.get("count", 1), help="Number of scrambles to generate")
    p.add_argument("--steps", type=int, default=d.get("steps", SCRAMBLE_LENGTH), help="Twist/flip moves per scramble")
    p.add_argument("--seed", type=int, default=d.get("seed"))
    p.add_argument("--json", action="store_true", default=bool(d.get("json", False)), help="Emit one JSON object per scramble")
    p.add_argument("--verbose", action="store_true", default=bool(d.get("verbose", False)), help="Trace every move")
    p.add_argument("--progress", action="store_true", default=False, help="Show a progress bar")
    return p


def _trace_scramble(twists: list[tuple[int, int]]) -> None:
    """Replay ``twists`` on a solved puzzle and log each move."""
    engine = SquareOneEngine()
    for n, twist in enumerate(twists, start=1):
        flipped = engine.step(*twist)
        _log(f"move={n} twist={format_twist(twist)} flipped={flipped} middle={engine.middle}")


def run(args: argparse.Namespace) -> list[list[tuple[int, int]]]:
    rng = np.random.default_rng(args.seed)
    engine = SquareOneEngine(rng=rng)
    scrambles: list[list[tuple[int, int]]] = []

    if args.verbose:
        _log(f"scramble_init count={args.count} steps={args.steps} seed={args.seed}")

    for _ in tqdm(range(args.count), desc="Scrambles", unit="scramble", disable=not args.progress):
        engine.reset()
        twists = engine.scramble(steps=args.steps)
        scrambles.append(twists)

        if args.verbose:
            _trace_scramble(twists)

        if args.json:
            out = {
                "scramble": [list(t) for t in twists],
                "text": format_scramble(twists),
                "state": engine.state_payload(),
            }
            print(json.dumps(out), flush=True)
        else:
            print(format_scramble(twists), flush=True)

    return scrambles


def main(argv: list[str] | None = None) -> None:
    # Pre-parse to get --config
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=str, default=None)
    pre_args, _ = pre.parse_known_args(argv)

    defaults = {}
    if pre_args.config:
        defaults = load_config(pre_args.config)

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be >= 1")
    if args.steps < 0:
        parser.error("--steps must be >= 0")

    run(args)


if __name__ == "__main__":
    main()
