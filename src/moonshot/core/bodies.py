"""Massive bodies: the primary (Earth) and the orbiting secondary (Moon).

Bodies are regular polygons in the engine, so their effective contact
radius is the apothem, not the circumradius.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .engine import EngineBody, RigidBodyEngine
from .math.vector import ArrayF


@dataclass(frozen=True, slots=True)
class BodySpec:
    """Fixed constants for one kind of massive body."""

    name: str
    radius: float
    mass: float
    edges: int
    influence_radius: float
    angular_velocity: float = 0.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"{self.name}: radius must be > 0")
        if self.mass <= 0.0:
            raise ValueError(f"{self.name}: mass must be > 0")
        if self.edges < 3:
            raise ValueError(f"{self.name}: edges must be >= 3")
        if self.influence_radius < 0.0:
            raise ValueError(f"{self.name}: influence_radius must be >= 0")


EARTH = BodySpec(
    name="Earth",
    radius=400.0,
    mass=10_000.0,
    edges=16,
    influence_radius=700.0,
    angular_velocity=-0.06,
)

MOON = BodySpec(
    name="Moon",
    radius=100.0,
    mass=10_000.0 / 24.0,
    edges=12,
    influence_radius=500.0,
    angular_velocity=-0.0006,
)


def apothem(radius: float, edges: int) -> float:
    """Distance from a regular polygon's center to the midpoint of an edge."""
    return radius * math.cos(math.pi / edges)


def polygon_vertices(radius: float, edges: int) -> ArrayF:
    """Regular polygon in local coordinates, first vertex at half an edge angle."""
    theta = 2.0 * math.pi / edges
    angles = theta * 0.5 + theta * np.arange(edges, dtype=np.float64)
    return np.stack([radius * np.cos(angles), radius * np.sin(angles)], axis=-1)


@dataclass(slots=True, eq=False)
class MassiveBody:
    spec: BodySpec
    handle: EngineBody
    center_to_edge: float

    @classmethod
    def create(
        cls,
        spec: BodySpec,
        position: Sequence[float],
        engine: RigidBodyEngine,
    ) -> "MassiveBody":
        handle = engine.add_kinematic_polygon(
            position,
            polygon_vertices(spec.radius, spec.edges),
            angular_velocity=spec.angular_velocity,
        )
        return cls(
            spec=spec,
            handle=handle,
            center_to_edge=apothem(spec.radius, spec.edges),
        )

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def radius(self) -> float:
        return self.spec.radius

    @property
    def mass(self) -> float:
        return self.spec.mass

    @property
    def edges(self) -> int:
        return self.spec.edges

    @property
    def influence_radius(self) -> float:
        return self.spec.influence_radius

    @property
    def position(self) -> ArrayF:
        return self.handle.position

    @property
    def angle(self) -> float:
        return self.handle.angle

    @property
    def angular_velocity(self) -> float:
        return self.handle.angular_velocity
