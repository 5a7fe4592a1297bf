"""Player craft: triangular hull, thrust toggle and rotation control."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .bodies import apothem, polygon_vertices
from .engine import EngineBody, RigidBodyEngine
from .math.vector import ArrayF, add, from_polar
from .state import CraftSnapshot


HULL_EDGES = 3
# Gap between the hull's back edge and the direction indicator tail.
TAIL_GAP = 4.0


@dataclass(frozen=True, slots=True)
class CraftSpec:
    radius: float = 20.0
    mass: float = 1.0
    thrust: float = 20.0
    rotation_rate: float = 0.42
    # How far the hull is sunk below the primary's circumradius at spawn.
    spawn_clearance: float = 16.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError("craft radius must be > 0")
        if self.mass <= 0.0:
            raise ValueError("craft mass must be > 0")
        if self.thrust < 0.0:
            raise ValueError("craft thrust must be >= 0")
        if self.rotation_rate < 0.0:
            raise ValueError("craft rotation_rate must be >= 0")


@dataclass(frozen=True, slots=True)
class Indicator:
    """Direction indicator drawn over the craft by the renderer."""

    nose: ArrayF
    tail: ArrayF
    thrusting: bool


@dataclass(slots=True, eq=False)
class Craft:
    spec: CraftSpec
    handle: EngineBody
    center_to_edge: float
    thrust_level: float = 0.0
    rotation_rate: float = 0.0

    @classmethod
    def create(
        cls,
        spec: CraftSpec,
        position: Sequence[float],
        engine: RigidBodyEngine,
    ) -> "Craft":
        # The hull's flat back faces +x at angle 0; a quarter turn points the
        # nose at -y, away from a primary body below it.
        handle = engine.add_dynamic_polygon(
            position,
            polygon_vertices(spec.radius, HULL_EDGES),
            mass=spec.mass,
            angle=math.pi / 2.0,
        )
        return cls(
            spec=spec,
            handle=handle,
            center_to_edge=apothem(spec.radius, HULL_EDGES),
        )

    @property
    def position(self) -> ArrayF:
        return self.handle.position

    @property
    def velocity(self) -> ArrayF:
        return self.handle.velocity

    @property
    def angle(self) -> float:
        return self.handle.angle

    @property
    def mass(self) -> float:
        return self.handle.mass

    @property
    def heading(self) -> float:
        """Direction the nose points in."""
        return self.angle + math.pi

    @property
    def thrusting(self) -> bool:
        return self.thrust_level != 0.0

    def toggle_thrust(self) -> float:
        self.thrust_level = 0.0 if self.thrust_level else self.spec.thrust
        return self.thrust_level

    def rotate_negative(self) -> None:
        self.rotation_rate = -self.spec.rotation_rate

    def rotate_positive(self) -> None:
        self.rotation_rate = self.spec.rotation_rate

    def stop_rotation(self) -> None:
        self.rotation_rate = 0.0
        self.handle.angular_velocity = 0.0

    def thrust_force(self) -> ArrayF:
        return from_polar(self.thrust_level, self.heading)

    def snapshot(self) -> CraftSnapshot:
        h = self.handle
        return CraftSnapshot(
            pos=h.position,
            vel=h.velocity,
            angle=h.angle,
            omega=h.angular_velocity,
            mass=h.mass,
            force=h.force,
        )

    def indicator(self) -> Indicator:
        pos = self.position
        angle = self.angle
        return Indicator(
            nose=add(pos, from_polar(self.spec.radius, angle + math.pi)),
            tail=add(pos, from_polar(self.center_to_edge + TAIL_GAP, angle)),
            thrusting=self.thrusting,
        )
