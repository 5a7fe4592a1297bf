"""Thin adapter over the pymunk rigid-body engine.

The orbital layer only needs body creation, force accumulation, velocity
setters, fixed-step integration and pairwise collision queries. Everything
else about the engine stays behind this module.

Chipmunk clears accumulated force and torque on dynamic bodies after each
step, so forces applied between two steps always add up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pymunk

from .math.vector import ArrayF


@dataclass(slots=True, eq=False)
class EngineBody:
    """Handle to one engine body and its single convex shape."""

    body: pymunk.Body
    shape: pymunk.Poly

    @property
    def position(self) -> ArrayF:
        p = self.body.position
        return np.array([p.x, p.y], dtype=np.float64)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.body.position = (float(value[0]), float(value[1]))

    @property
    def velocity(self) -> ArrayF:
        v = self.body.velocity
        return np.array([v.x, v.y], dtype=np.float64)

    @velocity.setter
    def velocity(self, value: Sequence[float]) -> None:
        self.body.velocity = (float(value[0]), float(value[1]))

    @property
    def angle(self) -> float:
        return float(self.body.angle)

    @angle.setter
    def angle(self, value: float) -> None:
        self.body.angle = float(value)

    @property
    def angular_velocity(self) -> float:
        return float(self.body.angular_velocity)

    @angular_velocity.setter
    def angular_velocity(self, value: float) -> None:
        self.body.angular_velocity = float(value)

    @property
    def force(self) -> ArrayF:
        f = self.body.force
        return np.array([f.x, f.y], dtype=np.float64)

    @property
    def mass(self) -> float:
        return float(self.body.mass)

    @property
    def is_kinematic(self) -> bool:
        return self.body.body_type == pymunk.Body.KINEMATIC

    def apply_force(self, force: Sequence[float]) -> None:
        """Accumulate a force through the center of mass (no torque)."""
        self.body.apply_force_at_world_point(
            (float(force[0]), float(force[1])), self.body.position
        )

    def local_vertices(self) -> ArrayF:
        return np.array([(v.x, v.y) for v in self.shape.get_vertices()], dtype=np.float64)


class RigidBodyEngine:
    """Owns the pymunk space: zero global gravity and no linear damping."""

    def __init__(self) -> None:
        self.space = pymunk.Space()
        self.space.gravity = (0.0, 0.0)
        self.space.damping = 1.0
        self._bodies: list[EngineBody] = []

    @property
    def bodies(self) -> tuple[EngineBody, ...]:
        return tuple(self._bodies)

    def add_dynamic_polygon(
        self,
        position: Sequence[float],
        vertices: ArrayF,
        mass: float,
        angle: float = 0.0,
    ) -> EngineBody:
        if mass <= 0.0:
            raise ValueError("dynamic body mass must be > 0")
        verts = [(float(x), float(y)) for x, y in np.asarray(vertices)]
        moment = pymunk.moment_for_poly(float(mass), verts)
        body = pymunk.Body(float(mass), moment, body_type=pymunk.Body.DYNAMIC)
        return self._add(body, verts, position, angle)

    def add_kinematic_polygon(
        self,
        position: Sequence[float],
        vertices: ArrayF,
        angle: float = 0.0,
        angular_velocity: float = 0.0,
    ) -> EngineBody:
        verts = [(float(x), float(y)) for x, y in np.asarray(vertices)]
        body = pymunk.Body(body_type=pymunk.Body.KINEMATIC)
        handle = self._add(body, verts, position, angle)
        handle.angular_velocity = angular_velocity
        return handle

    def _add(
        self,
        body: pymunk.Body,
        verts: list[tuple[float, float]],
        position: Sequence[float],
        angle: float,
    ) -> EngineBody:
        body.position = (float(position[0]), float(position[1]))
        body.angle = float(angle)
        shape = pymunk.Poly(body, verts)
        shape.friction = 0.0
        shape.elasticity = 0.0
        self.space.add(body, shape)
        handle = EngineBody(body=body, shape=shape)
        self._bodies.append(handle)
        return handle

    def step(self, dt: float) -> None:
        if dt <= 0.0:
            raise ValueError("dt must be > 0")
        self.space.step(dt)

    def collides(self, a: EngineBody, b: EngineBody) -> bool:
        """Return True when the two shapes currently overlap or touch.

        Bodies may have been moved by hand since the last step, so both are
        reindexed before the space is queried.
        """
        self.space.reindex_shapes_for_body(a.body)
        self.space.reindex_shapes_for_body(b.body)
        hits = self.space.shape_query(a.shape)
        return any(info.shape is b.shape for info in hits)
