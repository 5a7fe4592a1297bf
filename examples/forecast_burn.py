"""Burn away from Earth for a few seconds, then print the coasting forecast."""

from __future__ import annotations

import numpy as np

from moonshot.core.diagnostics import altitude, craft_speed
from moonshot.core.predictor import TrajectoryPredictor
from moonshot.core.step import SimulationStep
from moonshot.core.world import build_world


if __name__ == "__main__":
    world = build_world()
    stepper = SimulationStep()
    predictor = TrajectoryPredictor()

    burn_ticks = 3 * 60
    coast_ticks = 2 * 60
    report_every = 30

    world.craft.toggle_thrust()
    for tick in range(1, burn_ticks + coast_ticks + 1):
        if tick == burn_ticks + 1:
            world.craft.toggle_thrust()
        stepper.tick(world)
        if tick % report_every == 0:
            print(
                f"tick {tick:4d} | speed={craft_speed(world):8.2f} | "
                f"alt={altitude(world, world.primary):8.2f}"
            )

    path = predictor.predict(world.craft.snapshot(), world.gravity_field())
    print("forecast points:", len(path))
    print("forecast impact:", path.impact)
    if len(path):
        far = np.max(np.linalg.norm(path.points - world.primary.position, axis=1))
        print(f"farthest predicted distance from Earth: {far:.1f}")
