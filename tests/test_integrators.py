from __future__ import annotations

import numpy as np
import pytest

from moonshot.core.forces.gravity import GravityField
from moonshot.core.integrators import (
    INTEGRATORS,
    SymplecticEuler,
    VelocityVerlet,
    make_integrator,
)
from moonshot.core.state import ScratchBody


def _empty_field() -> GravityField:
    return GravityField.from_bodies([])


def _body(force=(0.0, 0.0)) -> ScratchBody:
    return ScratchBody(
        pos=np.array([0.0, 0.0]),
        vel=np.array([1.0, -2.0]),
        angle=0.0,
        omega=0.5,
        mass=2.0,
        force=np.array(force, dtype=np.float64),
    )


def _run_integrator(integrator, dt: float, steps: int) -> ScratchBody:
    # Constant force, re-applied every step.
    body = _body()
    field = _empty_field()
    for _ in range(steps):
        body.force[:] = (0.2, 0.4)
        integrator.step(body, field, dt)
        body.clear_forces()
    return body


def test_integrators_constant_accel_accuracy() -> None:
    dt = 0.01
    steps = 1000
    t = dt * steps

    v0 = np.array([1.0, -2.0])
    a = np.array([0.1, 0.2])

    expected_v = v0 + a * t
    expected_p = v0 * t + 0.5 * a * t * t
    expected_p_se = expected_p + 0.5 * a * dt * t

    body_se = _run_integrator(SymplecticEuler(), dt, steps)
    body_vv = _run_integrator(VelocityVerlet(), dt, steps)

    assert np.allclose(body_se.vel, expected_v, atol=1e-8)
    assert np.allclose(body_se.pos, expected_p_se, atol=1e-8)

    assert np.allclose(body_vv.vel, expected_v, atol=1e-8)
    assert np.allclose(body_vv.pos, expected_p, atol=1e-6)

    assert np.isclose(body_se.angle, 0.5 * t)
    assert np.isclose(body_vv.angle, 0.5 * t)


def test_symplectic_euler_updates_velocity_first() -> None:
    body = _body(force=(2.0, 0.0))
    SymplecticEuler().step(body, _empty_field(), 0.5)
    assert np.allclose(body.vel, [1.5, -2.0])
    assert np.allclose(body.pos, [0.75, -1.0])


def test_gravity_field_pulls_toward_source() -> None:
    field = GravityField(
        positions=np.array([[100.0, 0.0]]),
        masses=np.array([50.0]),
        influence=np.array([500.0]),
        contact_radius=np.array([10.0]),
    )
    body = ScratchBody(
        pos=np.array([0.0, 0.0]),
        vel=np.array([0.0, 0.0]),
        angle=0.0,
        omega=0.0,
        mass=1.0,
        force=np.zeros(2),
    )
    SymplecticEuler().step(body, field, 0.1)
    assert body.vel[0] > 0.0
    assert np.isclose(body.vel[1], 0.0)


def test_determinism_no_randomness() -> None:
    dt = 0.02
    steps = 50
    integrator = VelocityVerlet()

    body_a = _run_integrator(integrator, dt, steps)
    body_b = _run_integrator(integrator, dt, steps)

    assert np.array_equal(body_a.pos, body_b.pos)
    assert np.array_equal(body_a.vel, body_b.vel)


def test_make_integrator() -> None:
    assert set(INTEGRATORS) == {"symplectic_euler", "velocity_verlet"}
    assert isinstance(make_integrator("velocity_verlet"), VelocityVerlet)
    with pytest.raises(ValueError):
        make_integrator("rk4")
