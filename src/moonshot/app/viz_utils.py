"""Pure helpers for viewport math."""

from __future__ import annotations

import numpy as np

from ..core.math.vector import rotate


def compute_bounds(points: np.ndarray) -> tuple[np.ndarray, float]:
    if points.size == 0:
        return np.zeros(2, dtype=np.float32), 0.0
    pts = np.asarray(points, dtype=np.float32).reshape(-1, 2)
    mins = np.min(pts, axis=0)
    maxs = np.max(pts, axis=0)
    center = (mins + maxs) * 0.5
    radius = float(np.max(np.linalg.norm(pts - center, axis=1)))
    return center, radius


def world_outline(vertices: np.ndarray, position: np.ndarray, angle: float) -> np.ndarray:
    """Closed polyline of a body's hull in world coordinates, shape (N + 1, 2)."""
    verts = np.asarray(vertices, dtype=np.float64)
    if verts.ndim != 2 or verts.shape[1] != 2:
        raise ValueError("vertices must have shape (N, 2)")
    if verts.shape[0] == 0:
        return np.zeros((0, 2), dtype=np.float32)
    world = rotate(verts, angle) + np.asarray(position, dtype=np.float64)
    return np.vstack([world, world[:1]]).astype(np.float32)


def polyline_or_empty(points: np.ndarray) -> np.ndarray:
    """vispy Line needs at least two points; collapse shorter paths to none."""
    pts = np.asarray(points, dtype=np.float32).reshape(-1, 2)
    if pts.shape[0] < 2:
        return np.zeros((0, 2), dtype=np.float32)
    return pts
