from __future__ import annotations

import numpy as np
import pytest

from moonshot.app.viz_utils import compute_bounds, polyline_or_empty, world_outline


def test_compute_bounds() -> None:
    pts = np.array([[-2.0, 0.0], [2.0, 0.0], [0.0, 1.0]])
    center, radius = compute_bounds(pts)
    assert np.allclose(center, [0.0, 0.5])
    assert np.isclose(radius, np.hypot(2.0, 0.5))


def test_compute_bounds_empty() -> None:
    center, radius = compute_bounds(np.zeros((0, 2)))
    assert np.allclose(center, [0.0, 0.0])
    assert radius == 0.0


def test_world_outline_is_closed_and_placed() -> None:
    verts = np.array([[1.0, 0.0], [0.0, 1.0], [-1.0, 0.0]])
    outline = world_outline(verts, np.array([10.0, 5.0]), np.pi / 2.0)
    assert outline.shape == (4, 2)
    assert outline.dtype == np.float32
    assert np.allclose(outline[0], outline[-1])
    assert np.allclose(outline[:3], [[10.0, 6.0], [9.0, 5.0], [10.0, 4.0]], atol=1e-5)


def test_world_outline_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        world_outline(np.zeros((3, 3)), np.zeros(2), 0.0)


def test_polyline_or_empty() -> None:
    assert polyline_or_empty(np.zeros((1, 2))).shape == (0, 2)
    assert polyline_or_empty(np.zeros((0, 2))).shape == (0, 2)
    assert polyline_or_empty(np.ones((5, 2))).shape == (5, 2)
