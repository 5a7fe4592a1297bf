"""Kinematic orbit of the secondary body around the primary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .math.vector import ArrayF, angle_between, from_polar, norm, sub, unit

if TYPE_CHECKING:
    from .world import SimulationWorld


@dataclass(frozen=True, slots=True)
class OrbitUpdate:
    """Steers the secondary toward the next point of its circular orbit.

    The velocity has a fixed speed, so the orbit is approximate: each tick
    the body heads for the point angular_step further round a circle of its
    current radius.
    """

    angular_step: float = -1e-5
    speed: float = 6.0

    def __post_init__(self) -> None:
        if self.speed < 0.0:
            raise ValueError("orbit speed must be >= 0")

    def target(self, center: ArrayF, position: ArrayF) -> ArrayF:
        angle = angle_between(center, position)
        distance = norm(sub(position, center))
        return center + from_polar(distance, angle + self.angular_step)

    def step(self, world: "SimulationWorld", dt: float) -> ArrayF:
        body = world.secondary.handle
        position = body.position
        target = self.target(world.primary.position, position)
        body.velocity = unit(sub(target, position)) * self.speed
        return np.asarray(target, dtype=np.float64)
