"""Integrator interfaces and implementations for the prediction scratch body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .forces.gravity import GravityField
from .state import ScratchBody


class Integrator(Protocol):
    def step(self, body: ScratchBody, field: GravityField, dt: float) -> None:
        """Advance body by one fixed step (mutating).

        Accumulated body.force is included; clearing it is the caller's job.
        """


def _acceleration(body: ScratchBody, field: GravityField):
    return (body.force + field.total_force(body.pos, body.mass)) / body.mass


@dataclass(slots=True)
class SymplecticEuler:
    """Semi-implicit Euler: velocity first, then position."""

    def step(self, body: ScratchBody, field: GravityField, dt: float) -> None:
        a = _acceleration(body, field)
        body.vel += a * dt
        body.pos += body.vel * dt
        body.angle += body.omega * dt


@dataclass(slots=True)
class VelocityVerlet:
    def step(self, body: ScratchBody, field: GravityField, dt: float) -> None:
        a = _acceleration(body, field)
        body.pos += body.vel * dt + 0.5 * a * dt * dt
        a_next = _acceleration(body, field)
        body.vel += 0.5 * (a + a_next) * dt
        body.angle += body.omega * dt


INTEGRATORS = {
    "symplectic_euler": SymplecticEuler,
    "velocity_verlet": VelocityVerlet,
}


def make_integrator(name: str) -> Integrator:
    if name not in INTEGRATORS:
        raise ValueError(f"unsupported integrator: {name}")
    return INTEGRATORS[name]()
