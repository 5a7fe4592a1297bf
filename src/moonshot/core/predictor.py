"""Forward trajectory forecast for the craft.

The forecast integrates a scratch copy of the craft through a frozen gravity
field. It reads live state once, through a CraftSnapshot, and never writes
back. Controls are assumed unchanged, and only gravity and the snapshot's
pending force act on the scratch body.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .forces.gravity import GravityField
from .integrators import Integrator, SymplecticEuler, make_integrator
from .math.vector import ArrayF
from .state import CraftSnapshot, ScratchBody


@dataclass(frozen=True, slots=True)
class PredictionSettings:
    tick_rate: float = 24.0
    horizon: float = 100.0
    integrator: str = "symplectic_euler"

    def __post_init__(self) -> None:
        if self.tick_rate <= 0.0:
            raise ValueError("prediction tick_rate must be > 0")
        if self.horizon < 0.0:
            raise ValueError("prediction horizon must be >= 0")
        make_integrator(self.integrator)

    @property
    def dt(self) -> float:
        return 1.0 / self.tick_rate

    @property
    def steps(self) -> int:
        return int(round(self.horizon * self.tick_rate))

    def build(self) -> "TrajectoryPredictor":
        return TrajectoryPredictor(
            dt=self.dt,
            steps=self.steps,
            integrator=make_integrator(self.integrator),
        )


@dataclass(frozen=True, slots=True)
class Trajectory:
    points: ArrayF
    impact_body: int | None = None

    @property
    def impact(self) -> bool:
        return self.impact_body is not None

    def __len__(self) -> int:
        return self.points.shape[0]


@dataclass(slots=True)
class TrajectoryPredictor:
    dt: float = 1.0 / 24.0
    steps: int = 2400
    integrator: Integrator = field(default_factory=SymplecticEuler)

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("dt must be > 0")
        if self.steps < 0:
            raise ValueError("steps must be >= 0")

    def predict(self, snapshot: CraftSnapshot, gravity: GravityField) -> Trajectory:
        """Positions after each step, cut before the first one inside a body."""
        body = ScratchBody.from_snapshot(snapshot)
        path = np.empty((self.steps, 2), dtype=np.float64)
        count = 0
        hit: int | None = None
        for _ in range(self.steps):
            self.integrator.step(body, gravity, self.dt)
            body.clear_forces()
            hit = gravity.contact_index(body.pos)
            if hit is not None:
                break
            path[count] = body.pos
            count += 1
        return Trajectory(points=path[:count].copy(), impact_body=hit)
