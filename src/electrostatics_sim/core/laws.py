# MIT License (see LICENSE)
"""
Per-geometry field and potential laws.

Each law gives the contribution of a single source at a query point p.
With r = p - s.position and d = |r|:

  Point:                 E = k q r̂ / d²                V = k q / d
  Conducting sphere:     outside (d >= R) as Point
                         inside: E = 0                  V = k q / R
  Non-conducting sphere: outside (d >= R) as Point
                         inside: E = k q d r̂ / R³       V = (k q / 2R)(3 - d²/R²)
  Ring:                  sum of Point laws over N samples of charge q/N at
                         angles θᵢ = 2πi/N on the ring (XZ plane)

Singularity guard: if d < SINGULARITY_EPS the contribution is exactly zero.
For a Ring the same guard is also applied to every sample individually.
This is regularization, not an error.

Reference:
    Shell theorem: https://en.wikipedia.org/wiki/Shell_theorem
"""
from __future__ import annotations

import numpy as np

from ..constants import SINGULARITY_EPS, RING_SAMPLES_FIELD, RING_SAMPLES_POTENTIAL
from ..types import ChargeSource, Geometry
from ..util import zero3, norm


def ring_points(center: np.ndarray, radius: float, n: int) -> np.ndarray:
    """
    Sample positions of a ring discretized into n equal point charges.

    Args:
        center: Ring centre [x, y, z].
        radius: Ring radius.
        n: Number of samples.

    Returns:
        Array [n, 3]; sample i sits at angle 2πi/n in the XZ plane through center.
    """
    theta = 2.0 * np.pi * np.arange(n) / n
    pts = np.empty((n, 3), dtype=np.float64)
    pts[:, 0] = center[0] + radius * np.cos(theta)
    pts[:, 1] = center[1]
    pts[:, 2] = center[2] + radius * np.sin(theta)
    return pts


def _point_field(r: np.ndarray, d: float, kq: float) -> np.ndarray:
    return (kq / (d * d * d)) * r


def _ring_field(point: np.ndarray, s: ChargeSource, k: float, n: int) -> np.ndarray:
    r = point - ring_points(s.position, s.radius, n)
    d = np.linalg.norm(r, axis=1)
    keep = d >= SINGULARITY_EPS
    if not keep.any():
        return zero3()
    r, d = r[keep], d[keep]
    return (k * s.q / n) * np.sum(r / (d * d * d)[:, None], axis=0)


def _ring_potential(point: np.ndarray, s: ChargeSource, k: float, n: int) -> float:
    d = np.linalg.norm(point - ring_points(s.position, s.radius, n), axis=1)
    d = d[d >= SINGULARITY_EPS]
    return float((k * s.q / n) * np.sum(1.0 / d))


def source_field(
    point: np.ndarray,
    s: ChargeSource,
    k: float,
    ring_samples: int = RING_SAMPLES_FIELD,
) -> np.ndarray:
    """
    Electric field of a single source at a point.

    Args:
        point: Query point [x, y, z] as a float64 array.
        s: The source.
        k: Field constant.
        ring_samples: Discretization used if s is a Ring.

    Returns:
        Field vector [Ex, Ey, Ez] (a new array).
    """
    r = point - s.position
    d = norm(r)
    if d < SINGULARITY_EPS:
        return zero3()

    g = s.geometry
    if g is Geometry.POINT:
        return _point_field(r, d, k * s.q)
    if g is Geometry.CONDUCTING_SPHERE:
        if d >= s.radius:
            return _point_field(r, d, k * s.q)
        return zero3()
    if g is Geometry.NON_CONDUCTING_SPHERE:
        if d >= s.radius:
            return _point_field(r, d, k * s.q)
        # Linear in d inside: k q d r̂ / R³ = k q r / R³
        return (k * s.q / s.radius ** 3) * r
    if g is Geometry.RING:
        return _ring_field(point, s, k, ring_samples)

    raise TypeError(f"Unknown geometry: {g!r}")


def source_potential(
    point: np.ndarray,
    s: ChargeSource,
    k: float,
    ring_samples: int = RING_SAMPLES_POTENTIAL,
) -> float:
    """
    Electric potential of a single source at a point.

    Args:
        point: Query point [x, y, z] as a float64 array.
        s: The source.
        k: Field constant.
        ring_samples: Discretization used if s is a Ring.
    """
    d = norm(point - s.position)
    if d < SINGULARITY_EPS:
        return 0.0

    g = s.geometry
    if g is Geometry.POINT:
        return k * s.q / d
    if g is Geometry.CONDUCTING_SPHERE:
        if d >= s.radius:
            return k * s.q / d
        return k * s.q / s.radius
    if g is Geometry.NON_CONDUCTING_SPHERE:
        if d >= s.radius:
            return k * s.q / d
        R = s.radius
        return (k * s.q / (2.0 * R)) * (3.0 - (d * d) / (R * R))
    if g is Geometry.RING:
        return _ring_potential(point, s, k, ring_samples)

    raise TypeError(f"Unknown geometry: {g!r}")
