"""Fly a game definition headless for a fixed number of ticks."""

from __future__ import annotations

import argparse
from pathlib import Path

from moonshot.__main__ import run_headless
from moonshot.io import load_config


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("config", type=Path)
    parser.add_argument("--ticks", type=int, default=600)
    parser.add_argument("--thrust", action="store_true")
    args = parser.parse_args()
    return run_headless(load_config(args.config), args.ticks, thrust=args.thrust)


if __name__ == "__main__":
    raise SystemExit(main())
