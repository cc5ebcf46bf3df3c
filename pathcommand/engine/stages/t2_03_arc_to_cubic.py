"""T2.03 — Elliptical Arc → Cubic Bézier Approximation.

Each arc becomes one cubic per ≤120° piece. With chain splitting on, every
cubic is its own C command; otherwise one arc command gives one chained C.
An S right after a converted arc is written out as an explicit C so it keeps
its unreflected first control point.
"""

from __future__ import annotations

from pathcommand.engine.commands import (
    Command,
    CommandType,
    ControlTracker,
    Pen,
    Polarity,
    unsupported_reason,
)
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import Layer, transform
from pathcommand.utils.arcs import arc_to_cubic


@transform(
    id="T2.03",
    layer=Layer.CURVES,
    option="convert_arc_to_cubic",
    dependencies=["T2.02"],
    description="Approximate elliptical arcs (A) with cubic Béziers (C)",
)
def convert_arcs(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []
    pen = Pen()
    tracker = ControlTracker()
    after_arc = False

    for cmd in commands:
        if cmd.type is CommandType.CLOSEPATH:
            tracker.reset()

        convert = cmd.type is CommandType.ARC
        explicit = cmd.type is CommandType.SMOOTH_CUBIC_CURVETO and after_arc
        if convert or explicit:
            reason = unsupported_reason(cmd)
            if reason:
                options.report(f"T2.03: {cmd.letter} not converted: {reason}")
                convert = explicit = False

        groups: list[tuple[float, ...]] = []
        for _, group, start in pen.walk(cmd):
            implied = tracker.step(cmd, group, start)
            if convert:
                rx, ry, rotation, large_arc, sweep, x, y = group
                groups.extend(
                    arc_to_cubic(start, (x, y), rx, ry, rotation, large_arc != 0, sweep != 0)
                )
            elif explicit:
                groups.append((*implied, *group))

        after_arc = convert
        if convert and options.split_chains:
            result.extend(Command(CommandType.CUBIC_CURVETO, Polarity.ABSOLUTE, g) for g in groups)
        elif convert or explicit:
            params = tuple(v for g in groups for v in g)
            result.append(Command(CommandType.CUBIC_CURVETO, Polarity.ABSOLUTE, params))
        else:
            result.append(cmd)

    return result
