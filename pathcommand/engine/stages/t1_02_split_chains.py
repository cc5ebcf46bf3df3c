"""T1.02 — Chain Splitting.

One command with N parameter groups → N commands with one group each.
Moveto pairs after the first become lineto, as in path replay. Relative
chains are left alone: their groups compound and cannot be regrouped as-is.
"""

from __future__ import annotations

from pathcommand.engine.commands import Command, CommandType, unsupported_reason
from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.NORMALIZATION,
    option="split_chains",
    dependencies=["T1.01"],
    description="Split chained parameter groups into one command per group",
)
def split_chains(commands: list[Command], options: PathOptions) -> list[Command]:
    result: list[Command] = []

    for cmd in commands:
        groups = cmd.groups()
        if cmd.type is CommandType.CLOSEPATH or len(groups) <= 1:
            result.append(cmd)
            continue

        reason = unsupported_reason(cmd)
        if reason:
            options.report(f"T1.02: {cmd.letter} chain not split: {reason}")
            result.append(cmd)
            continue

        for i, group in enumerate(groups):
            cmd_type = CommandType.LINETO if cmd.type is CommandType.MOVETO and i > 0 else cmd.type
            result.append(Command(cmd_type, cmd.polarity, group))

    return result
