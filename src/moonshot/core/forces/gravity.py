"""Cut-off gravity between the craft and the massive bodies.

F = G * m_target * m_source / max(r, r_min)^2, directed at the source, and
exactly zero once r exceeds the source's influence radius. The cutoff is a
hard step, not a smooth falloff. G is a tuned game constant, not the SI
value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

import numpy as np

from ..math.vector import ArrayF, norm, unit


DEFAULT_G = 300.0
DEFAULT_MIN_DISTANCE = 1.0


class GravitySource(Protocol):
    position: ArrayF
    mass: float
    influence_radius: float
    center_to_edge: float


def gravity_force(
    target_pos: ArrayF,
    target_mass: float,
    source: GravitySource,
    G: float = DEFAULT_G,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> ArrayF:
    """Force exerted by one source on a target point mass."""
    forces = _pairwise_forces(
        np.asarray(target_pos, dtype=np.float64),
        float(target_mass),
        np.asarray(source.position, dtype=np.float64)[None, :],
        np.array([source.mass], dtype=np.float64),
        np.array([source.influence_radius], dtype=np.float64),
        G,
        min_distance,
    )
    return forces[0]


def total_gravity(
    target_pos: ArrayF,
    target_mass: float,
    sources: Iterable[GravitySource],
    G: float = DEFAULT_G,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> ArrayF:
    return GravityField.from_bodies(sources, G, min_distance).total_force(
        target_pos, target_mass
    )


def _pairwise_forces(
    pos: ArrayF,
    mass: float,
    src_pos: ArrayF,
    src_mass: ArrayF,
    influence: ArrayF,
    G: float,
    min_distance: float,
) -> ArrayF:
    delta = src_pos - pos
    dist = norm(delta)
    r = np.maximum(dist, min_distance)
    magnitude = np.where(dist > influence, 0.0, mass * src_mass / (r * r) * G)
    return unit(delta) * magnitude[:, None]


@dataclass(frozen=True, slots=True)
class GravityField:
    """Frozen copy of the massive bodies as seen by gravity and contact tests."""

    positions: ArrayF
    masses: ArrayF
    influence: ArrayF
    contact_radius: ArrayF
    G: float = DEFAULT_G
    min_distance: float = DEFAULT_MIN_DISTANCE

    def __post_init__(self) -> None:
        positions = np.array(self.positions, dtype=np.float64).reshape(-1, 2)
        k = positions.shape[0]
        arrays = {"positions": positions}
        for name in ("masses", "influence", "contact_radius"):
            arr = np.array(getattr(self, name), dtype=np.float64).reshape(-1)
            if arr.shape != (k,):
                raise ValueError(f"{name} must have shape ({k},)")
            arrays[name] = arr
        for name, arr in arrays.items():
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        if self.min_distance <= 0.0:
            raise ValueError("min_distance must be > 0")

    @classmethod
    def from_bodies(
        cls,
        bodies: Iterable[GravitySource],
        G: float = DEFAULT_G,
        min_distance: float = DEFAULT_MIN_DISTANCE,
    ) -> "GravityField":
        bodies = list(bodies)
        return cls(
            positions=np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 2),
            masses=np.array([b.mass for b in bodies], dtype=np.float64),
            influence=np.array([b.influence_radius for b in bodies], dtype=np.float64),
            contact_radius=np.array([b.center_to_edge for b in bodies], dtype=np.float64),
            G=float(G),
            min_distance=float(min_distance),
        )

    def __len__(self) -> int:
        return self.positions.shape[0]

    def forces(self, pos: ArrayF, mass: float) -> ArrayF:
        """Per-source forces on a point mass, shape (K, 2)."""
        if len(self) == 0:
            return np.zeros((0, 2), dtype=np.float64)
        return _pairwise_forces(
            np.asarray(pos, dtype=np.float64),
            float(mass),
            self.positions,
            self.masses,
            self.influence,
            self.G,
            self.min_distance,
        )

    def total_force(self, pos: ArrayF, mass: float) -> ArrayF:
        return np.sum(self.forces(pos, mass), axis=0).reshape(2)

    def contact_index(self, pos: ArrayF) -> int | None:
        """Index of the first body whose contact radius contains pos."""
        if len(self) == 0:
            return None
        dist = norm(self.positions - np.asarray(pos, dtype=np.float64))
        hits = np.flatnonzero(dist < self.contact_radius)
        if hits.size == 0:
            return None
        return int(hits[0])
