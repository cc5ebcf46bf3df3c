"""T1.03 — Horizontal / Vertical LineTo Expansion.

H x → L x,y and V y → L x,y, freezing the other axis at the current point.
A chained H or V becomes one chained L.
"""

from __future__ import annotations

from pathcommand.engine.commands import Command, CommandType, Pen, Polarity, unsupported_reason
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import Layer, transform

_AXIS_TYPES = (CommandType.HORIZONTAL_LINETO, CommandType.VERTICAL_LINETO)


@transform(
    id="T1.03",
    layer=Layer.NORMALIZATION,
    option="convert_lines",
    dependencies=["T1.02"],
    description="Convert horizontal and vertical lineto commands to lineto",
)
def convert_axis_lines(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []
    pen = Pen()

    for cmd in commands:
        reason = unsupported_reason(cmd) if cmd.type in _AXIS_TYPES else None
        if cmd.type not in _AXIS_TYPES or reason:
            if reason:
                options.report(f"T1.03: {cmd.letter} not expanded: {reason}")
            result.append(cmd)
            pen.move(cmd)
            continue

        params: list[float] = []
        for _, (value,), start in pen.walk(cmd):
            if cmd.type is CommandType.HORIZONTAL_LINETO:
                params.extend((value, start.y))
            else:
                params.extend((start.x, value))
        result.append(Command(CommandType.LINETO, Polarity.ABSOLUTE, tuple(params)))

    return result
