"""Tests for the curve stages: smooth expansion, quadratic elevation, arc approximation."""

from __future__ import annotations

import math

import numpy as np
import pytest
from svgpathtools import Arc, CubicBezier, parse_path

from pathcommand.converter import convert_path_commands
from pathcommand.engine.commands import CommandType, Point
from pathcommand.engine.config import PathOptions
from pathcommand.engine.stages.t2_02_quadratic import elevate_quadratic
from pathcommand.utils.arcs import MAX_SEGMENT_SPAN, arc_to_cubic, center_parameterization
from pathcommand.utils.geometry import cubic_point, quadratic_point
from tests.conftest import HALF_CIRCLE_PATH, SMOOTH_CUBIC_PATH, SMOOTH_QUADRATIC_PATH


def _structured(path: str, **flags) -> list:
    return convert_path_commands(path, PathOptions(return_structured=True, **flags))


def _sample(start, groups, n=1001) -> np.ndarray:
    """Dense points along consecutive cubic groups (c1x, c1y, c2x, c2y, x, y)."""
    t = np.linspace(0.0, 1.0, n)
    points = []
    p0 = start
    for g in groups:
        points.append(cubic_point(p0, g[0:2], g[2:4], g[4:6], t))
        p0 = g[4:6]
    return np.vstack(points)


def _nearest(samples: np.ndarray, point: complex) -> float:
    return float(np.min(np.hypot(samples[:, 0] - point.real, samples[:, 1] - point.imag)))


# -- T2.01 smooth -------------------------------------------------------------


def test_smooth_cubic_reflects_previous_control():
    out = convert_path_commands(SMOOTH_CUBIC_PATH, PathOptions(convert_smooth=True))
    assert out == "M0,0 C10,0,20,10,20,20 C20,30,30,40,40,40"


def test_smooth_cubic_without_previous_curve():
    out = convert_path_commands("M0,0 L10,10 S20,20 30,10", PathOptions(convert_smooth=True))
    assert out == "M0,0 L10,10 C10,10,20,20,30,10"


def test_consecutive_smooth_cubics_read_input_controls():
    path = "M0,0 C0,10 10,10 10,0 S20,-10 20,0 S30,10 30,0"
    out = convert_path_commands(path, PathOptions(convert_smooth=True))
    assert out == "M0,0 C0,10,10,10,10,0 C10,-10,20,-10,20,0 C20,10,30,10,30,0"


def test_smooth_quadratic_chain():
    out = convert_path_commands(SMOOTH_QUADRATIC_PATH, PathOptions(convert_smooth=True))
    assert out == "M0,0 Q10,10,20,0 Q30,-10,40,0 50,10,60,0"


def test_smooth_quadratic_after_cubic_not_reflected():
    out = convert_path_commands("M0,0 C0,10 10,10 10,0 T20,0", PathOptions(convert_smooth=True))
    assert out == "M0,0 C0,10,10,10,10,0 Q10,0,20,0"


def test_closepath_clears_reflection():
    out = convert_path_commands("M0,0 C0,10 10,10 0,0 Z S5,5 10,0", PathOptions(convert_smooth=True))
    assert out == "M0,0 C0,10,10,10,0,0 Z C0,0,5,5,10,0"


@pytest.mark.parametrize("path", [SMOOTH_CUBIC_PATH, SMOOTH_QUADRATIC_PATH, "m0 0 c5 -10 15 -10 20 0 s15 10 20 0 20 -10 20 0"])
def test_smooth_expansion_matches_reference_parser(path):
    expected = parse_path(path)
    actual = parse_path(convert_path_commands(path, PathOptions(convert_smooth=True)))
    assert len(actual) == len(expected)
    for got, want in zip(actual, expected):
        for t in (0.0, 0.25, 0.5, 0.75, 1.0):
            assert abs(got.point(t) - want.point(t)) < 1e-9


def test_relative_smooth_reported():
    messages: list[str] = []
    options = PathOptions(convert_absolute=False, convert_smooth=True, diagnostics=messages.append)
    out = convert_path_commands("M0,0 C0,10 10,10 10,0 s10,-10 10,0", options)
    assert out.endswith("s10,-10,10,0")
    assert any(m.startswith("T2.01") for m in messages)


# -- T2.02 quadratic ----------------------------------------------------------


def test_quadratic_elevation_exact():
    c1x, c1y, c2x, c2y, x, y = elevate_quadratic(Point(0, 0), Point(10, 0), Point(10, 10))
    assert (c1x, c1y) == pytest.approx((20 / 3, 0))
    assert (c2x, c2y) == pytest.approx((10, 10 / 3))
    assert (x, y) == (10, 10)


def test_quadratic_command_elevated():
    (_, cubic) = _structured("M0,0 Q10,0 10,10", convert_quadratic_to_cubic=True)
    assert cubic.type is CommandType.CUBIC_CURVETO
    assert cubic.parameters == pytest.approx((6.6667, 0, 10, 3.3333, 10, 10), abs=1e-4)


def test_elevated_curve_traces_quadratic():
    start, control, end = (3.0, -2.0), (17.5, 40.0), (31.0, 6.0)
    cubic = elevate_quadratic(Point(*start), Point(*control), Point(*end))
    t = np.linspace(0.0, 1.0, 51)
    np.testing.assert_allclose(
        cubic_point(start, cubic[0:2], cubic[2:4], cubic[4:6], t),
        quadratic_point(start, control, end, t),
        atol=1e-9,
    )


def test_smooth_quadratic_elevated_without_smooth_stage():
    commands = _structured("M0,0 Q10,10 20,0 T40,0", convert_quadratic_to_cubic=True)
    assert [c.letter for c in commands] == ["M", "C", "C"]
    assert commands[2].parameters == pytest.approx((80 / 3, -20 / 3, 100 / 3, -20 / 3, 40, 0))


def test_smooth_cubic_after_elevated_quadratic_made_explicit():
    commands = _structured("M0,0 Q10,10 20,0 S30,10 40,0", convert_quadratic_to_cubic=True)
    assert commands[2].letter == "C"
    assert commands[2].parameters == (20.0, 0.0, 30.0, 10.0, 40.0, 0.0)


def test_quadratic_elevation_matches_reference_parser():
    path = "M0,0 Q10,10 20,0 T40,0 Q45,20 60,10"
    expected = parse_path(path)
    actual = parse_path(convert_path_commands(path, PathOptions(convert_quadratic_to_cubic=True)))
    assert all(isinstance(seg, CubicBezier) for seg in actual)
    for got, want in zip(actual, expected):
        for t in (0.1, 0.5, 0.9):
            assert abs(got.point(t) - want.point(t)) < 1e-9


# -- T2.03 arcs ---------------------------------------------------------------


def test_half_circle_endpoint_and_sweep():
    groups = arc_to_cubic((0, 0), (10, 0), 5, 5, 0, large_arc=False, sweep=True)
    assert len(groups) == 2
    assert groups[-1][4:6] == (10.0, 0.0)
    samples = _sample((0, 0), groups)
    assert _nearest(samples, complex(5, -5)) < 0.02
    assert samples[:, 1].max() < 1e-9


def test_half_circle_other_sweep():
    groups = arc_to_cubic((0, 0), (10, 0), 5, 5, 0, large_arc=False, sweep=False)
    samples = _sample((0, 0), groups)
    assert _nearest(samples, complex(5, 5)) < 0.02
    assert groups[-1][4:6] == (10.0, 0.0)


def test_half_circle_midpoint_of_pieces():
    groups = arc_to_cubic((0, 0), (10, 0), 5, 5, 0, sweep=True)
    mid = cubic_point((0, 0), groups[0][0:2], groups[0][2:4], groups[0][4:6], 0.5)
    # first piece covers 120° of a radius-5 circle centred on (5, 0)
    assert math.hypot(mid[0] - 5, mid[1]) == pytest.approx(5, abs=0.01)


def test_center_parameterization_scales_small_radii():
    cx, cy, rx, ry, theta1, theta2 = center_parameterization((0, 0), (10, 0), 1, 1, False, True)
    assert (cx, cy, rx, ry) == pytest.approx((5, 0, 5, 5))
    assert abs(theta2 - theta1) == pytest.approx(math.pi)


def test_degenerate_arcs_become_lines():
    assert arc_to_cubic((5, 5), (5, 5), 3, 3) == [(5, 5, 5, 5, 5, 5)]
    assert arc_to_cubic((5, 5), (10, 10), 0, 3) == [(5, 5, 10, 10, 10, 10)]


def test_arc_output_chained_by_default():
    out = convert_path_commands(HALF_CIRCLE_PATH, PathOptions(convert_arc_to_cubic=True, return_structured=True))
    assert [c.letter for c in out] == ["M", "C"]
    assert len(out[1].parameters) == 12


def test_arc_output_split_with_split_chains():
    options = PathOptions(convert_arc_to_cubic=True, split_chains=True, return_structured=True)
    out = convert_path_commands(HALF_CIRCLE_PATH, options)
    assert [c.letter for c in out] == ["M", "C", "C"]
    assert all(len(c.parameters) == 6 for c in out[1:])


def test_smooth_cubic_after_arc_made_explicit():
    commands = _structured("M0,0 A5,5 0 0 1 10,0 S20,10 20,0", convert_arc_to_cubic=True)
    assert commands[-1].letter == "C"
    assert commands[-1].parameters == (10.0, 0.0, 20.0, 10.0, 20.0, 0.0)


def test_relative_arc_reported():
    messages: list[str] = []
    options = PathOptions(convert_absolute=False, convert_arc_to_cubic=True, diagnostics=messages.append)
    assert convert_path_commands("M0,0 a5,5 0 0 1 10,0", options) == "M0,0 a5,5,0,0,1,10,0"
    assert any(m.startswith("T2.03") for m in messages)


@pytest.mark.parametrize(
    "path",
    [
        "M10,10 A20,10 30 1 0 40,30",
        "M10,10 A20,10 -45 0 1 40,30",
        "M0,0 A10,10 0 1 1 10,10",
        "M80,80 A45,45 0 0 0 125,125",
        "M5,5 A3,8 120 1 0 -4,2",
    ],
)
def test_arc_matches_reference_ellipse(path):
    (arc,) = parse_path(path)
    assert isinstance(arc, Arc)
    start = (arc.start.real, arc.start.imag)
    groups = arc_to_cubic(
        start,
        (arc.end.real, arc.end.imag),
        arc.radius.real,
        arc.radius.imag,
        arc.rotation,
        arc.large_arc,
        arc.sweep,
    )

    # one cubic per started 120° of sweep
    assert len(groups) == math.ceil(math.radians(abs(arc.delta)) / MAX_SEGMENT_SPAN - 1e-9)
    assert groups[-1][4:6] == (arc.end.real, arc.end.imag)

    # every point lies on the (possibly scaled) ellipse
    samples = _sample(start, groups)
    phi = math.radians(arc.rotation)
    dx, dy = samples[:, 0] - arc.center.real, samples[:, 1] - arc.center.imag
    ux = dx * math.cos(phi) + dy * math.sin(phi)
    uy = -dx * math.sin(phi) + dy * math.cos(phi)
    radial = (ux / arc.radius.real) ** 2 + (uy / arc.radius.imag) ** 2
    assert np.all(np.abs(radial - 1) < 1e-2)

    # and goes around the same side
    scale = max(arc.radius.real, arc.radius.imag)
    for t in (0.25, 0.5, 0.75):
        assert _nearest(samples, arc.point(t)) < 0.01 * scale
