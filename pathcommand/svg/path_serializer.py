"""Write a command sequence back out as path data."""

from __future__ import annotations

from pathcommand.engine.commands import Command
from pathcommand.utils.math_helpers import correct_float, format_number

LINE_BREAK = "\n\t"


def format_group(group: tuple[float, ...], correct_floating_point: bool = False) -> str:
    if correct_floating_point:
        group = tuple(correct_float(v) for v in group)
    return ",".join(format_number(v) for v in group)


def serialize_command(cmd: Command, add_line_breaks: bool = False, correct_floating_point: bool = False) -> str:
    """'C' + groups: comma inside a group, space (or line break) between groups."""
    separator = LINE_BREAK if add_line_breaks else " "
    groups = [format_group(g, correct_floating_point) for g in cmd.groups()]
    return cmd.letter + separator.join(groups)


def serialize_commands(
    commands: list[Command],
    add_line_breaks: bool = False,
    correct_floating_point: bool = False,
) -> str:
    """Generate the ``d`` attribute value for a command sequence.

    With line breaks every command, and every chained group after a command's
    first, starts on its own tab-indented line.
    """
    parts = [serialize_command(cmd, add_line_breaks, correct_floating_point) for cmd in commands]
    if add_line_breaks:
        return "".join(LINE_BREAK + part for part in parts)
    return " ".join(parts)
