"""Flight diagnostics for status readouts."""

from __future__ import annotations

import numpy as np

from .bodies import MassiveBody
from .world import SimulationWorld


def craft_speed(world: SimulationWorld) -> float:
    return float(np.linalg.norm(world.craft.velocity))


def distance_to(world: SimulationWorld, body: MassiveBody) -> float:
    return float(np.linalg.norm(world.craft.position - body.position))


def altitude(world: SimulationWorld, body: MassiveBody) -> float:
    """Distance from the craft's center to the body's flat surface."""
    return distance_to(world, body) - body.center_to_edge


def orbit_radius(world: SimulationWorld) -> float:
    return float(np.linalg.norm(world.secondary.position - world.primary.position))


def summary(world: SimulationWorld) -> dict[str, float | int | str]:
    return {
        "tick": world.tick_count,
        "time": world.time,
        "speed": craft_speed(world),
        "altitude_primary": altitude(world, world.primary),
        "altitude_secondary": altitude(world, world.secondary),
        "orbit_radius": orbit_radius(world),
        "outcome": world.outcome.value,
    }
