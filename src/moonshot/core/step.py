"""Fixed-rate physics tick.

Order matters and is fixed: gravity, thrust, rotation, orbit update, then
engine integration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .orbit import OrbitUpdate
from .world import SimulationWorld


TickFn = Callable[[SimulationWorld, float], object]


def apply_gravity(world: SimulationWorld, dt: float) -> None:
    craft = world.craft
    force = world.gravity_field().total_force(craft.position, craft.mass)
    craft.handle.apply_force(force)


def apply_thrust(world: SimulationWorld, dt: float) -> None:
    craft = world.craft
    if not craft.thrusting:
        return
    craft.handle.apply_force(craft.thrust_force())


def apply_rotation(world: SimulationWorld, dt: float) -> None:
    # Velocity override, not a torque: rotation starts and stops instantly.
    craft = world.craft
    if craft.rotation_rate != 0.0:
        craft.handle.angular_velocity = craft.rotation_rate


@dataclass(slots=True)
class SimulationStep:
    orbit: OrbitUpdate = field(default_factory=OrbitUpdate)
    hooks: list[TickFn] = field(init=False)

    def __post_init__(self) -> None:
        self.hooks = [apply_gravity, apply_thrust, apply_rotation, self.orbit.step]

    def tick(self, world: SimulationWorld) -> bool:
        """Advance the live world by one tick; refused once it has halted."""
        if world.halted:
            return False
        dt = world.physics.dt
        for hook in self.hooks:
            hook(world, dt)
        world.engine.step(dt)
        world.tick_count += 1
        return True
