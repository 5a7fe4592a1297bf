"""Force models acting on the craft."""

from .gravity import (  # noqa: F401
    DEFAULT_G,
    DEFAULT_MIN_DISTANCE,
    GravityField,
    gravity_force,
    total_gravity,
)
