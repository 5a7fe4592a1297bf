"""Math utilities namespace."""

from .vector import (  # noqa: F401
    add,
    angle_between,
    from_polar,
    norm,
    rotate,
    scale,
    sub,
    unit,
    vec2,
)
