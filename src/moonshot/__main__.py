"""Command-line entry point: launch the game or fly it headless."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .app.controls import Action
from .app.game_controller import GameController
from .io.config import GameConfig, load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moonshot")
    parser.add_argument("--config", type=Path, default=None, help="game definition JSON")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=600, help="headless ticks to run")
    parser.add_argument("--thrust", action="store_true", help="headless: start with thrust on")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--version", action="version", version=f"moonshot {__version__}")
    return parser


def run_headless(config: GameConfig, ticks: int, thrust: bool = False) -> int:
    if ticks < 0:
        raise ValueError("ticks must be >= 0")
    controller = GameController(config)
    if thrust:
        controller.handle_action(Action.TOGGLE_THRUST)
    for _ in range(ticks):
        if not controller.step_once():
            break
        controller.check_outcome()
    trajectory = controller.predict()
    outcome = controller.check_outcome()

    for key, value in controller.diagnostics().items():
        print(f"{key}: {value}")
    print("predicted points:", len(trajectory))
    print("predicted impact:", trajectory.impact)
    print("outcome:", outcome.value)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args.config) if args.config is not None else GameConfig()
    if args.headless:
        return run_headless(config, args.ticks, thrust=args.thrust)

    from .app.main import run_app

    return run_app(config)


if __name__ == "__main__":
    raise SystemExit(main())
