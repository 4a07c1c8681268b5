# vecmath/utils.py
import logging
from typing import Sequence

import numpy as np

from vecmath.vector import EPSILON, Vector3

logger = logging.getLogger(__name__)


def distance(u: Vector3, v: Vector3) -> float:
    """
    Returns the Euclidean distance between u and v.
    """
    return u.sub(v).mag()


def from_spherical(radius: float, polar: float, azimuth: float) -> Vector3:
    """
    Returns the Cartesian vector for the spherical coordinates
    (radius, polar angle, azimuthal angle).

    ``polar`` is measured from the Z-axis and normally lies in [0, pi];
    ``azimuth`` is measured from the X-axis within the XY-plane and normally
    lies in [0, 2 * pi]. Angles outside those ranges wrap naturally; infinite
    angles give nan components rather than raising.
    """
    with np.errstate(invalid="ignore"):
        sp = np.sin(np.float64(polar))
        cp = np.cos(np.float64(polar))
        sa = np.sin(np.float64(azimuth))
        ca = np.cos(np.float64(azimuth))
        components = np.float64(radius) * np.array([sp * ca, sp * sa, cp])
    return Vector3(components)


def interpolate(a: Vector3, b: Vector3, t: float) -> Vector3:
    """
    Linearly interpolates between a at t=0 and b at t=1. t is not clamped.
    """
    return a.add(b.sub(a).times(t))


def average(*vectors: Vector3) -> Vector3:
    accumulator = Vector3.zero()
    if not vectors:
        return accumulator

    for vec in vectors:
        accumulator = accumulator.add(vec)

    return accumulator.div(len(vectors))


def weighted_average(vectors: Sequence[Vector3], weights: Sequence[float]) -> Vector3:
    """
    Returns the weighted mean of ``vectors``.

    Pairs vectors and weights by index up to the shorter of the two inputs.
    Negative or approximately zero weights are skipped along with their
    vectors; if nothing survives, the zero vector is returned.
    """
    accumulator = Vector3.zero()
    total_weight = 0.0

    n = min(len(vectors), len(weights))
    if len(vectors) != len(weights):
        logger.debug("weighted_average: truncating %d vectors and %d weights to %d",
                     len(vectors), len(weights), n)
    if n == 0:
        return accumulator

    for vec, weight in zip(vectors[:n], weights[:n]):
        if weight > EPSILON:
            total_weight += weight
            accumulator = accumulator.add(vec.times(weight))

    if total_weight > EPSILON:
        return accumulator.div(total_weight)
    logger.debug("weighted_average: no positive weight among %d entries", n)
    return accumulator


def project(v: Vector3, n: Vector3) -> Vector3:
    """
    Projects v onto the line spanned by n. n must be a unit vector; it is
    not normalized here.
    """
    return n.times(v.dot(n))


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v.sub(n.times(2 * v.dot(n)))
