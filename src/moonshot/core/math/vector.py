"""2-D vector utilities for NumPy arrays.

All vectors are expected to be shaped (..., 2). Functions never modify
their inputs.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


def vec2(v: Iterable[float]) -> ArrayF:
    """Return a fresh float64 copy of a 2-vector (or stack of them)."""
    out = np.array(v, dtype=np.float64)
    if out.shape[-1:] != (2,):
        raise ValueError("vector must have shape (..., 2)")
    return out


def add(a: ArrayF, b: ArrayF) -> ArrayF:
    return np.add(a, b, dtype=np.float64)


def sub(a: ArrayF, b: ArrayF) -> ArrayF:
    return np.subtract(a, b, dtype=np.float64)


def scale(v: ArrayF, s: float | ArrayF) -> ArrayF:
    return np.multiply(v, s, dtype=np.float64)


def norm(v: ArrayF, axis: int = -1) -> ArrayF:
    """Return the L2 norm along an axis."""
    return np.linalg.norm(v, axis=axis)


def unit(v: ArrayF, axis: int = -1) -> ArrayF:
    """Return unit vectors with safe handling of zero vectors."""
    v = np.asarray(v, dtype=np.float64)
    n = np.linalg.norm(v, axis=axis, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        u = np.where(n > 0.0, v / n, 0.0)
    return u


def angle_between(a: ArrayF, b: ArrayF) -> ArrayF | float:
    """Angle of the direction from a to b, measured from +x."""
    d = np.subtract(b, a, dtype=np.float64)
    return np.arctan2(d[..., 1], d[..., 0])


def from_polar(length: float | ArrayF, angle: float | ArrayF) -> ArrayF:
    length = np.asarray(length, dtype=np.float64)
    angle = np.asarray(angle, dtype=np.float64)
    return np.stack([length * np.cos(angle), length * np.sin(angle)], axis=-1)


def rotate(v: ArrayF, angle: float) -> ArrayF:
    """Rotate vectors counter-clockwise (in a y-up frame) by angle radians."""
    c = np.cos(angle)
    s = np.sin(angle)
    v = np.asarray(v, dtype=np.float64)
    x = v[..., 0]
    y = v[..., 1]
    return np.stack([c * x - s * y, s * x + c * y], axis=-1)
