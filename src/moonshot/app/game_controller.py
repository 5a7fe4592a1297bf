"""Headless game controller for the desktop app and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np

from ..core.craft import Indicator
from ..core.diagnostics import summary
from ..core.outcome import LoopHandle, OutcomeCheck
from ..core.predictor import Trajectory, TrajectoryPredictor
from ..core.step import SimulationStep
from ..core.world import Outcome, SimulationWorld
from ..io.config import GameConfig, definition_to_config, load_config
from .controls import Action


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameRuntime:
    world: SimulationWorld
    stepper: SimulationStep
    predictor: TrajectoryPredictor
    outcome_check: OutcomeCheck


@dataclass(frozen=True, slots=True)
class BodyView:
    name: str
    position: np.ndarray
    angle: float
    vertices: np.ndarray


@dataclass(frozen=True, slots=True)
class FrameState:
    bodies: tuple[BodyView, ...]
    indicator: Indicator
    trajectory: Trajectory
    outcome: Outcome


class GameController:
    def __init__(self, config: GameConfig | None = None) -> None:
        self.config_path: Path | None = None
        self.config: GameConfig | None = None
        self.runtime: GameRuntime | None = None
        self.tick_loop = LoopHandle("tick")
        self.frame_loop = LoopHandle("frame")
        if config is not None:
            self.load_config(config)

    def load_file(self, path: str | Path) -> None:
        config_path = Path(path)
        self.load_config(load_config(config_path))
        self.config_path = config_path

    def load_definition(self, defn: dict[str, Any]) -> None:
        self.load_config(definition_to_config(defn))

    def load_config(self, config: GameConfig) -> None:
        self.config = config
        self.runtime = GameRuntime(
            world=config.build_world(),
            stepper=SimulationStep(orbit=config.orbit),
            predictor=config.prediction.build(),
            outcome_check=OutcomeCheck(loops=[self.tick_loop, self.frame_loop]),
        )
        self.tick_loop.start()
        self.frame_loop.start()

    def reset(self) -> bool:
        if self.config is None:
            return False
        self.load_config(self.config)
        logger.info("game reset")
        return True

    @property
    def world(self) -> SimulationWorld | None:
        return self.runtime.world if self.runtime is not None else None

    @property
    def outcome(self) -> Outcome:
        if self.runtime is None:
            return Outcome.RUNNING
        return self.runtime.world.outcome

    def can_step(self) -> bool:
        if self.runtime is None:
            return False
        return self.tick_loop.running and not self.runtime.world.halted

    def step_once(self) -> bool:
        if not self.can_step():
            return False
        runtime = self.runtime
        assert runtime is not None
        return runtime.stepper.tick(runtime.world)

    def predict(self) -> Trajectory:
        if self.runtime is None:
            return Trajectory(points=np.zeros((0, 2), dtype=np.float64))
        world = self.runtime.world
        return self.runtime.predictor.predict(world.craft.snapshot(), world.gravity_field())

    def check_outcome(self) -> Outcome:
        if self.runtime is None:
            return Outcome.RUNNING
        return self.runtime.outcome_check.check(self.runtime.world)

    def frame(self) -> FrameState | None:
        """Per-frame work: forecast the path, then test for the terminal state."""
        if self.runtime is None or not self.frame_loop.running:
            return None
        world = self.runtime.world
        trajectory = self.predict()
        outcome = self.check_outcome()
        return FrameState(
            bodies=_body_views(world),
            indicator=world.craft.indicator(),
            trajectory=trajectory,
            outcome=outcome,
        )

    def handle_action(self, action: Action) -> bool:
        if action is Action.RESET:
            return self.reset()
        if self.runtime is None or self.runtime.world.halted:
            return False
        craft = self.runtime.world.craft
        if action is Action.TOGGLE_THRUST:
            craft.toggle_thrust()
        elif action is Action.ROTATE_NEGATIVE:
            craft.rotate_negative()
        elif action is Action.ROTATE_POSITIVE:
            craft.rotate_positive()
        elif action is Action.STOP_ROTATION:
            craft.stop_rotation()
        else:
            raise ValueError(f"unsupported action: {action}")
        return True

    def diagnostics(self) -> dict[str, float | int | str]:
        if self.runtime is None:
            return {"tick": 0, "time": 0.0}
        info = summary(self.runtime.world)
        craft = self.runtime.world.craft
        info["thrust"] = craft.thrust_level
        info["rotation_rate"] = craft.rotation_rate
        return info


def _body_views(world: SimulationWorld) -> tuple[BodyView, ...]:
    entries = [(b.name, b.handle) for b in world.massive_bodies]
    entries.append(("Craft", world.craft.handle))
    return tuple(
        BodyView(
            name=name,
            position=handle.position,
            angle=handle.angle,
            vertices=handle.local_vertices(),
        )
        for name, handle in entries
    )
