"""T1.01 — Relative → Absolute Coordinates.

Rewrite m l h v c s q t a z as M L H V C S Q T A Z. Each group of a chained
relative command is offset by the current point left behind by the previous
group of the same command, not by the point the command started from.
"""

from __future__ import annotations

from pathcommand.engine.commands import Command, CommandType, Pen, Point, Polarity
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import Layer, transform


def _absolute_group(cmd_type: CommandType, group: tuple[float, ...], start: Point) -> tuple[float, ...]:
    if cmd_type is CommandType.HORIZONTAL_LINETO:
        return (group[0] + start.x,)
    if cmd_type is CommandType.VERTICAL_LINETO:
        return (group[0] + start.y,)
    if cmd_type is CommandType.ARC:
        # radii, rotation and flags are not coordinates
        return group[:5] + (group[5] + start.x, group[6] + start.y)
    return tuple(v + (start.y if i % 2 else start.x) for i, v in enumerate(group))


@transform(
    id="T1.01",
    layer=Layer.NORMALIZATION,
    option="convert_absolute",
    description="Convert relative commands to absolute commands",
)
def convert_to_absolute(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []
    pen = Pen()

    for cmd in commands:
        if not cmd.is_relative:
            result.append(cmd)
            pen.move(cmd)
            continue

        if cmd.type is CommandType.CLOSEPATH:
            result.append(Command(CommandType.CLOSEPATH, Polarity.ABSOLUTE, cmd.parameters))
            pen.move(cmd)
            continue

        if not cmd.is_well_formed:
            options.report(
                f"T1.01: {cmd.letter} has {len(cmd.parameters)} parameters, "
                f"expected a multiple of {cmd.arity}; left relative"
            )
            result.append(cmd)
            pen.move(cmd)
            continue

        params: list[float] = []
        for _, group, start in pen.walk(cmd):
            params.extend(_absolute_group(cmd.type, group, start))
        result.append(Command(cmd.type, Polarity.ABSOLUTE, tuple(params)))

    return result
