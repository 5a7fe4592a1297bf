"""Plain kinematic state containers, detached from the engine."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .math.vector import ArrayF


@dataclass(frozen=True, slots=True)
class CraftSnapshot:
    """Copy of the live craft's kinematics taken at one instant.

    Holds only plain arrays and floats, never engine handles.
    """

    pos: ArrayF
    vel: ArrayF
    angle: float
    omega: float
    mass: float
    force: ArrayF

    def __post_init__(self) -> None:
        for name in ("pos", "vel", "force"):
            arr = np.array(getattr(self, name), dtype=np.float64)
            if arr.shape != (2,):
                raise ValueError(f"{name} must have shape (2,)")
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        if self.mass <= 0.0:
            raise ValueError("mass must be > 0")


@dataclass(slots=True)
class ScratchBody:
    """Mutable point body advanced by the predictor's integrator."""

    pos: ArrayF
    vel: ArrayF
    angle: float
    omega: float
    mass: float
    force: ArrayF

    @classmethod
    def from_snapshot(cls, snap: CraftSnapshot) -> "ScratchBody":
        return cls(
            pos=snap.pos.copy(),
            vel=snap.vel.copy(),
            angle=float(snap.angle),
            omega=float(snap.omega),
            mass=float(snap.mass),
            force=snap.force.copy(),
        )

    def clear_forces(self) -> None:
        self.force[:] = 0.0
