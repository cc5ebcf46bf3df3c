"""T2.01 — Smooth Bézier Expansion.

S → C and T → Q. The implied first control point is the previous curve's
last control point reflected about the current point, when the previous
operation is a curve of the same family; otherwise it is the current point.
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

_EXPANDED = {
    CommandType.SMOOTH_CUBIC_CURVETO: CommandType.CUBIC_CURVETO,
    CommandType.SMOOTH_QUADRATIC_CURVETO: CommandType.QUADRATIC_CURVETO,
}


@transform(
    id="T2.01",
    layer=Layer.CURVES,
    option="convert_smooth",
    dependencies=["T1.03"],
    description="Convert smooth Béziers (S, T) to regular Béziers (C, Q)",
)
def convert_smooth(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []
    pen = Pen()
    tracker = ControlTracker()

    for cmd in commands:
        if cmd.type is CommandType.CLOSEPATH:
            tracker.reset()

        expand = cmd.type in _EXPANDED
        if expand:
            reason = unsupported_reason(cmd)
            if reason:
                options.report(f"T2.01: {cmd.letter} not expanded: {reason}")
                expand = False

        params: list[float] = []
        for _, group, start in pen.walk(cmd):
            implied = tracker.step(cmd, group, start)
            if expand:
                params.extend((*implied, *group))

        if expand:
            result.append(Command(_EXPANDED[cmd.type], Polarity.ABSOLUTE, tuple(params)))
        else:
            result.append(cmd)

    return result
