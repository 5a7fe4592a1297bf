from __future__ import annotations

import numpy as np

from moonshot.core.step import (
    SimulationStep,
    apply_gravity,
    apply_rotation,
    apply_thrust,
)
from moonshot.core.world import Outcome, build_world


def test_hook_order() -> None:
    stepper = SimulationStep()
    assert stepper.hooks[:3] == [apply_gravity, apply_thrust, apply_rotation]
    assert stepper.hooks[3] == stepper.orbit.step
    assert len(stepper.hooks) == 4


def test_gravity_and_thrust_accumulate() -> None:
    world = build_world()
    craft = world.craft
    craft.toggle_thrust()
    dt = world.physics.dt

    apply_gravity(world, dt)
    gravity = world.gravity_field().total_force(craft.position, craft.mass)
    assert np.allclose(craft.handle.force, gravity)
    # Only the primary is in range at spawn, pulling toward +y.
    assert gravity[1] > 0.0
    assert np.isclose(gravity[0], 0.0)

    apply_thrust(world, dt)
    assert np.allclose(craft.handle.force, gravity + np.array([0.0, -20.0]))


def test_thrust_off_adds_nothing() -> None:
    world = build_world()
    apply_thrust(world, world.physics.dt)
    assert np.allclose(world.craft.handle.force, [0.0, 0.0])


def test_rotation_overrides_angular_velocity() -> None:
    world = build_world()
    craft = world.craft
    craft.handle.angular_velocity = 0.3
    apply_rotation(world, world.physics.dt)
    assert np.isclose(craft.handle.angular_velocity, 0.3)

    craft.rotate_positive()
    apply_rotation(world, world.physics.dt)
    assert np.isclose(craft.handle.angular_velocity, 0.42)

    craft.rotate_negative()
    apply_rotation(world, world.physics.dt)
    assert np.isclose(craft.handle.angular_velocity, -0.42)


def test_tick_counts_and_refuses_when_halted() -> None:
    world = build_world()
    stepper = SimulationStep()
    assert stepper.tick(world)
    assert stepper.tick(world)
    assert world.tick_count == 2
    assert np.isclose(world.time, 2.0 / 60.0)

    world.outcome = Outcome.REACHED_TARGET
    before = world.craft.position
    assert not stepper.tick(world)
    assert world.tick_count == 2
    assert np.allclose(world.craft.position, before)


def test_free_fall_toward_primary() -> None:
    world = build_world()
    world.craft.handle.position = (0.0, -600.0)
    stepper = SimulationStep()
    for _ in range(30):
        stepper.tick(world)
    assert world.craft.velocity[1] > 0.0
    assert world.craft.position[1] > -600.0
    assert np.isclose(world.craft.position[0], 0.0)


def test_thrust_lifts_craft_off_primary() -> None:
    world = build_world()
    start = world.craft.position
    world.craft.toggle_thrust()
    stepper = SimulationStep()
    for _ in range(60):
        stepper.tick(world)
    assert world.craft.position[1] < start[1]
    assert world.craft.velocity[1] < 0.0


def test_rotation_turns_craft() -> None:
    world = build_world()
    world.craft.handle.position = (0.0, -600.0)
    start = world.craft.angle
    world.craft.rotate_positive()
    stepper = SimulationStep()
    for _ in range(60):
        stepper.tick(world)
    assert np.isclose(world.craft.angle - start, 0.42, atol=1e-2)
