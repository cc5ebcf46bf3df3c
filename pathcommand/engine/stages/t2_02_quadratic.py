"""T2.02 — Quadratic → Cubic Bézier Elevation.

Exact degree elevation: C1 = Q0 + 2/3·(Q1 − Q0), C2 = Q2 + 2/3·(Q1 − Q2).

A T left over from a disabled smooth expansion is elevated too, using its
implied control point. An S right after an elevated curve is written out as
an explicit C: it used to follow a quadratic (no reflection) and would
otherwise start reflecting the new cubic's control point.
"""

from __future__ import annotations

from pathcommand.engine.commands import (
    Command,
    CommandType,
    ControlTracker,
    Pen,
    Point,
    Polarity,
    unsupported_reason,
)
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import Layer, transform
from pathcommand.utils.geometry import lerp

_QUADRATIC_TYPES = (CommandType.QUADRATIC_CURVETO, CommandType.SMOOTH_QUADRATIC_CURVETO)


def elevate_quadratic(start: Point, control: Point, end: Point) -> tuple[float, ...]:
    """Cubic parameters (c1, c2, end) drawing the same curve as quadratic start-control-end."""
    c1 = lerp(start, control, 2 / 3)
    c2 = lerp(end, control, 2 / 3)
    return (*c1, *c2, end.x, end.y)


@transform(
    id="T2.02",
    layer=Layer.CURVES,
    option="convert_quadratic_to_cubic",
    dependencies=["T2.01"],
    description="Convert quadratic Béziers (Q, T) to cubic Béziers (C)",
)
def convert_quadratic(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []
    pen = Pen()
    tracker = ControlTracker()
    after_elevated = False

    for cmd in commands:
        if cmd.type is CommandType.CLOSEPATH:
            tracker.reset()

        elevate = cmd.type in _QUADRATIC_TYPES
        explicit = cmd.type is CommandType.SMOOTH_CUBIC_CURVETO and after_elevated
        if elevate or explicit:
            reason = unsupported_reason(cmd)
            if reason:
                options.report(f"T2.02: {cmd.letter} not converted: {reason}")
                elevate = explicit = False

        params: list[float] = []
        for _, group, start in pen.walk(cmd):
            implied = tracker.step(cmd, group, start)
            if elevate:
                control = Point(group[0], group[1]) if implied is None else implied
                params.extend(elevate_quadratic(start, control, Point(group[-2], group[-1])))
            elif explicit:
                params.extend((*implied, *group))

        after_elevated = elevate
        if elevate or explicit:
            result.append(Command(CommandType.CUBIC_CURVETO, Polarity.ABSOLUTE, tuple(params)))
        else:
            result.append(cmd)

    return result
