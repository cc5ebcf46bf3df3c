"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

Vec = tuple[float, float]


def reflect(point: Vec, about: Vec) -> tuple[float, float]:
    """Mirror ``point`` through ``about``: about + (about - point)."""
    return (2 * about[0] - point[0], 2 * about[1] - point[1])


def lerp(a: Vec, b: Vec, t: float) -> tuple[float, float]:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def rotate_points(points: NDArray[np.float64], radians: float) -> NDArray[np.float64]:
    """Rotate an Nx2 array of points about the origin (counter-clockwise in y-up terms)."""
    c, s = np.cos(radians), np.sin(radians)
    rotation = np.array([[c, -s], [s, c]])
    return points @ rotation.T


def cubic_point(
    p0: Vec, p1: Vec, p2: Vec, p3: Vec, t: float | NDArray[np.float64]
) -> NDArray[np.float64]:
    """Evaluate a cubic Bézier at ``t`` (scalar → shape (2,), array → shape (N, 2))."""
    t_arr = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
    mt = 1.0 - t_arr
    pts = np.array([p0, p1, p2, p3], dtype=np.float64)
    out = (
        mt**3 * pts[0]
        + 3 * mt**2 * t_arr * pts[1]
        + 3 * mt * t_arr**2 * pts[2]
        + t_arr**3 * pts[3]
    )
    return out[0] if np.ndim(t) == 0 else out


def quadratic_point(p0: Vec, p1: Vec, p2: Vec, t: float | NDArray[np.float64]) -> NDArray[np.float64]:
    """Evaluate a quadratic Bézier at ``t``."""
    t_arr = np.atleast_1d(np.asarray(t, dtype=np.float64))[:, None]
    mt = 1.0 - t_arr
    pts = np.array([p0, p1, p2], dtype=np.float64)
    out = mt**2 * pts[0] + 2 * mt * t_arr * pts[1] + t_arr**2 * pts[2]
    return out[0] if np.ndim(t) == 0 else out
