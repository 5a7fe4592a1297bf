from __future__ import annotations

import numpy as np
import pytest

from moonshot.core.engine import RigidBodyEngine


SQUARE = np.array([[-1.0, -1.0], [1.0, -1.0], [1.0, 1.0], [-1.0, 1.0]])


def test_forces_accumulate_until_step() -> None:
    engine = RigidBodyEngine()
    body = engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=2.0)
    body.apply_force((1.0, 0.0))
    body.apply_force((1.0, 0.5))
    assert np.allclose(body.force, [2.0, 0.5])
    engine.step(0.1)
    assert np.allclose(body.force, [0.0, 0.0])


def test_positions_then_velocities_without_damping() -> None:
    engine = RigidBodyEngine()
    body = engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=2.0)
    body.apply_force((4.0, 0.0))
    engine.step(0.5)
    # Positions move with the old velocity, then the force is applied.
    assert np.allclose(body.position, [0.0, 0.0])
    assert np.allclose(body.velocity, [1.0, 0.0])
    engine.step(0.5)
    assert np.allclose(body.position, [0.5, 0.0])
    assert np.allclose(body.velocity, [1.0, 0.0])


def test_kinematic_body_follows_its_velocity() -> None:
    engine = RigidBodyEngine()
    body = engine.add_kinematic_polygon((0.0, 0.0), SQUARE, angular_velocity=0.25)
    assert body.is_kinematic
    body.velocity = (6.0, -2.0)
    engine.step(1.0)
    assert np.allclose(body.position, [6.0, -2.0])
    assert np.isclose(body.angle, 0.25)
    assert np.allclose(body.velocity, [6.0, -2.0])


def test_collision_query() -> None:
    engine = RigidBodyEngine()
    a = engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=1.0)
    b = engine.add_kinematic_polygon((1.5, 0.0), SQUARE)
    c = engine.add_kinematic_polygon((10.0, 0.0), SQUARE)
    assert engine.collides(a, b)
    assert not engine.collides(a, c)

    a.position = (10.5, 0.0)
    assert engine.collides(a, c)
    assert not engine.collides(a, b)


def test_local_vertices_and_registry() -> None:
    engine = RigidBodyEngine()
    body = engine.add_dynamic_polygon((3.0, 4.0), SQUARE, mass=1.0)
    verts = body.local_vertices()
    assert verts.shape == (4, 2)
    assert np.allclose(np.abs(verts), 1.0)
    assert engine.bodies == (body,)


def test_invalid_inputs() -> None:
    engine = RigidBodyEngine()
    with pytest.raises(ValueError):
        engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=0.0)
    with pytest.raises(ValueError):
        engine.step(0.0)


def test_disjoint_shapes_report_no_contact() -> None:
    engine = RigidBodyEngine()
    a = engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=1.0)
    b = engine.add_kinematic_polygon((100.0, 0.0), SQUARE)
    assert not engine.collides(a, b)
    engine.step(1.0 / 60.0)
    assert not engine.collides(a, b)
    assert not engine.collides(b, a)


def test_collision_query_sees_moved_target() -> None:
    engine = RigidBodyEngine()
    a = engine.add_dynamic_polygon((0.0, 0.0), SQUARE, mass=1.0)
    b = engine.add_kinematic_polygon((50.0, 0.0), SQUARE)
    engine.step(1.0 / 60.0)
    b.position = (1.0, 0.0)
    assert engine.collides(a, b)
