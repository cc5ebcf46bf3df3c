"""Elliptical arc → cubic Bézier approximation. No engine imports.

Endpoint parameterization (start, end, radii, rotation, flags) is converted
once to centre parameterization (centre, start angle, end angle) on the
un-rotated ellipse. The angular span is then cut into pieces of at most 120°,
each approximated by one cubic whose handles follow the ellipse tangents:
handle length k = 4/3 · tan(Δθ / 4). Points are rotated back at the end.

https://www.w3.org/TR/SVG11/implnote.html#ArcConversionEndpointToCenter
"""

from __future__ import annotations

import math

import numpy as np

from pathcommand.utils.geometry import Vec, rotate_points

# Widest span approximated by a single cubic
MAX_SEGMENT_SPAN = math.radians(120)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def center_parameterization(
    start: Vec,
    end: Vec,
    rx: float,
    ry: float,
    large_arc: bool,
    sweep: bool,
) -> tuple[float, float, float, float, float, float]:
    """Solve the ellipse for an un-rotated arc.

    Returns ``(cx, cy, rx, ry, theta1, theta2)``. Radii too small to span the
    chord are scaled up uniformly. ``theta2 - theta1`` is positive for
    sweep=1 and negative for sweep=0; its magnitude exceeds π for large arcs.
    """
    x1, y1 = start
    x2, y2 = end
    x = (x1 - x2) / 2
    y = (y1 - y2) / 2

    h = (x * x) / (rx * rx) + (y * y) / (ry * ry)
    if h > 1:
        h = math.sqrt(h)
        rx *= h
        ry *= h

    rx2 = rx * rx
    ry2 = ry * ry
    numerator = rx2 * ry2 - rx2 * y * y - ry2 * x * x
    denominator = rx2 * y * y + ry2 * x * x
    k = math.sqrt(abs(numerator / denominator))
    if large_arc == sweep:
        k = -k

    cx = k * rx * y / ry + (x1 + x2) / 2
    cy = k * -ry * x / rx + (y1 + y2) / 2

    theta1 = math.asin(_clamp_unit((y1 - cy) / ry))
    theta2 = math.asin(_clamp_unit((y2 - cy) / ry))
    if x1 < cx:
        theta1 = math.pi - theta1
    if x2 < cx:
        theta2 = math.pi - theta2
    if theta1 < 0:
        theta1 += 2 * math.pi
    if theta2 < 0:
        theta2 += 2 * math.pi

    if sweep and theta1 > theta2:
        theta1 -= 2 * math.pi
    if not sweep and theta2 > theta1:
        theta2 -= 2 * math.pi

    return cx, cy, rx, ry, theta1, theta2


def _arc_segment(cx: float, cy: float, rx: float, ry: float, theta1: float, theta2: float) -> list[Vec]:
    """One cubic for a span of at most 120°: [control1, control2, end]."""
    k = 4 / 3 * math.tan((theta2 - theta1) / 4)
    cos1, sin1 = math.cos(theta1), math.sin(theta1)
    cos2, sin2 = math.cos(theta2), math.sin(theta2)

    x1, y1 = cx + rx * cos1, cy + ry * sin1
    x2, y2 = cx + rx * cos2, cy + ry * sin2

    return [
        (x1 - k * rx * sin1, y1 + k * ry * cos1),
        (x2 + k * rx * sin2, y2 - k * ry * cos2),
        (x2, y2),
    ]


def _arc_segments(cx: float, cy: float, rx: float, ry: float, theta1: float, theta2: float) -> list[Vec]:
    """Approximate the span theta1 → theta2 with cubics, splitting wide spans recursively."""
    span = theta2 - theta1
    if abs(span) <= MAX_SEGMENT_SPAN:
        return _arc_segment(cx, cy, rx, ry, theta1, theta2)

    split = theta1 + math.copysign(MAX_SEGMENT_SPAN, span)
    return _arc_segment(cx, cy, rx, ry, theta1, split) + _arc_segments(cx, cy, rx, ry, split, theta2)


def arc_to_cubic(
    start: Vec,
    end: Vec,
    rx: float,
    ry: float,
    rotation: float = 0.0,
    large_arc: bool = False,
    sweep: bool = False,
) -> list[tuple[float, float, float, float, float, float]]:
    """Convert one arc to cubic Bézier groups ``(c1x, c1y, c2x, c2y, x, y)``.

    ``rotation`` is the ellipse x-axis rotation in degrees. An arc with equal
    endpoints or a zero radius is drawn as a straight line, returned as a
    single degenerate cubic. The last group ends exactly on ``end``.
    """
    (x1, y1), (x2, y2) = start, end
    rx, ry = abs(rx), abs(ry)
    if (x1 == x2 and y1 == y2) or rx == 0 or ry == 0:
        return [(x1, y1, x2, y2, x2, y2)]

    phi = math.radians(rotation % 360)
    endpoints = np.array([[x1, y1], [x2, y2]], dtype=np.float64)
    if phi:
        endpoints = rotate_points(endpoints, -phi)
    (ux1, uy1), (ux2, uy2) = endpoints

    cx, cy, rx, ry, theta1, theta2 = center_parameterization(
        (float(ux1), float(uy1)), (float(ux2), float(uy2)), rx, ry, large_arc, sweep
    )
    points = np.array(_arc_segments(cx, cy, rx, ry, theta1, theta2), dtype=np.float64)
    if phi:
        points = rotate_points(points, phi)

    groups = [tuple(float(v) for v in row) for row in points.reshape(-1, 6)]
    groups[-1] = groups[-1][:4] + (float(x2), float(y2))
    return groups
