"""3D vector arithmetic: the Vector3 value type and free functions over it."""

import logging

from .utils import (
    average,
    distance,
    from_spherical,
    interpolate,
    project,
    reflect,
    weighted_average,
)
from .vector import EPSILON, Vector3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector3",
    "EPSILON",
    "distance",
    "from_spherical",
    "interpolate",
    "average",
    "weighted_average",
    "project",
    "reflect",
]
