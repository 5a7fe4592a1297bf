"""Simulation world: the engine plus every entity living in it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from .bodies import EARTH, MOON, BodySpec, MassiveBody
from .craft import Craft, CraftSpec
from .engine import RigidBodyEngine
from .forces.gravity import DEFAULT_G, DEFAULT_MIN_DISTANCE, GravityField


logger = logging.getLogger(__name__)


class Outcome(Enum):
    RUNNING = "running"
    REACHED_TARGET = "reached_target"


@dataclass(frozen=True, slots=True)
class PhysicsSettings:
    tick_rate: float = 60.0
    gravitational_constant: float = DEFAULT_G
    min_distance: float = DEFAULT_MIN_DISTANCE

    def __post_init__(self) -> None:
        if self.tick_rate <= 0.0:
            raise ValueError("tick_rate must be > 0")
        if self.min_distance <= 0.0:
            raise ValueError("min_distance must be > 0")

    @property
    def dt(self) -> float:
        return 1.0 / self.tick_rate


@dataclass(slots=True, eq=False)
class SimulationWorld:
    """Owns all live state; components receive it explicitly."""

    engine: RigidBodyEngine
    primary: MassiveBody
    secondary: MassiveBody
    craft: Craft
    physics: PhysicsSettings
    tick_count: int = 0
    outcome: Outcome = Outcome.RUNNING

    @property
    def massive_bodies(self) -> tuple[MassiveBody, MassiveBody]:
        return (self.primary, self.secondary)

    @property
    def halted(self) -> bool:
        return self.outcome is not Outcome.RUNNING

    @property
    def time(self) -> float:
        return self.tick_count * self.physics.dt

    def gravity_field(self) -> GravityField:
        return GravityField.from_bodies(
            self.massive_bodies,
            G=self.physics.gravitational_constant,
            min_distance=self.physics.min_distance,
        )


def craft_spawn_position(
    primary_position: Sequence[float], primary: BodySpec, craft: CraftSpec
) -> np.ndarray:
    """Just above the primary's top edge, in a y-down frame."""
    lift = primary.radius + craft.radius - craft.spawn_clearance
    return np.array(
        [float(primary_position[0]), float(primary_position[1]) - lift],
        dtype=np.float64,
    )


def build_world(
    physics: PhysicsSettings | None = None,
    primary: BodySpec = EARTH,
    secondary: BodySpec = MOON,
    craft: CraftSpec | None = None,
    primary_position: Sequence[float] = (0.0, 0.0),
    secondary_offset: Sequence[float] = (1000.0, 0.0),
) -> SimulationWorld:
    physics = physics or PhysicsSettings()
    craft = craft or CraftSpec()
    engine = RigidBodyEngine()
    p0 = np.asarray(primary_position, dtype=np.float64)
    earth = MassiveBody.create(primary, p0, engine)
    moon = MassiveBody.create(
        secondary, p0 + np.asarray(secondary_offset, dtype=np.float64), engine
    )
    ship = Craft.create(craft, craft_spawn_position(p0, primary, craft), engine)
    logger.debug(
        "built world: %s at %s, %s at %s, craft at %s",
        earth.name,
        earth.position,
        moon.name,
        moon.position,
        ship.position,
    )
    return SimulationWorld(
        engine=engine,
        primary=earth,
        secondary=moon,
        craft=ship,
        physics=physics,
    )
