"""Path command model — one frozen record per drawing operation.

A command carries its kind, its polarity (absolute / relative, the letter case
in path data) and a flat parameter tuple made of fixed-size groups. Several
groups on one command form a chain: each group is an implicit repetition.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import NamedTuple

from pathcommand.utils.geometry import reflect


class CommandType(str, enum.Enum):
    MOVETO = "M"
    LINETO = "L"
    HORIZONTAL_LINETO = "H"
    VERTICAL_LINETO = "V"
    CUBIC_CURVETO = "C"
    SMOOTH_CUBIC_CURVETO = "S"
    QUADRATIC_CURVETO = "Q"
    SMOOTH_QUADRATIC_CURVETO = "T"
    ARC = "A"
    CLOSEPATH = "Z"


class Polarity(str, enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


# Parameters per group, https://www.w3.org/TR/SVG11/paths.html#PathData
ARITY: dict[CommandType, int] = {
    CommandType.MOVETO: 2,
    CommandType.LINETO: 2,
    CommandType.HORIZONTAL_LINETO: 1,
    CommandType.VERTICAL_LINETO: 1,
    CommandType.CUBIC_CURVETO: 6,
    CommandType.SMOOTH_CUBIC_CURVETO: 4,
    CommandType.QUADRATIC_CURVETO: 4,
    CommandType.SMOOTH_QUADRATIC_CURVETO: 2,
    CommandType.ARC: 7,
    CommandType.CLOSEPATH: 0,
}

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Command:
    """A single path command, possibly chained."""

    type: CommandType
    polarity: Polarity = Polarity.ABSOLUTE
    parameters: tuple[float, ...] = ()

    @classmethod
    def from_letter(cls, letter: str, parameters: tuple[float, ...] | list[float] = ()) -> Command:
        """Build a command from its path-data letter ('m' → relative moveto)."""
        if len(letter) != 1 or letter not in COMMAND_LETTERS:
            raise ValueError(f"Invalid path command letter {letter!r}")
        polarity = Polarity.RELATIVE if letter.islower() else Polarity.ABSOLUTE
        return cls(CommandType(letter.upper()), polarity, tuple(parameters))

    @property
    def letter(self) -> str:
        return self.type.value.lower() if self.is_relative else self.type.value

    @property
    def arity(self) -> int:
        return ARITY[self.type]

    @property
    def is_relative(self) -> bool:
        return self.polarity is Polarity.RELATIVE

    @property
    def is_well_formed(self) -> bool:
        """True when the parameter count is an exact multiple of the group arity."""
        if self.arity == 0:
            return not self.parameters
        return bool(self.parameters) and len(self.parameters) % self.arity == 0

    def groups(self) -> list[tuple[float, ...]]:
        """Split the parameters into arity-sized groups.

        A trailing incomplete group (malformed input) is returned as-is so no
        parameter is ever dropped.
        """
        n = self.arity
        if n == 0:
            return [self.parameters] if self.parameters else []
        return [self.parameters[i:i + n] for i in range(0, len(self.parameters), n)]

    def with_parameters(self, parameters: tuple[float, ...] | list[float]) -> Command:
        return replace(self, parameters=tuple(parameters))

    def __str__(self) -> str:
        from pathcommand.svg.path_serializer import serialize_command

        return serialize_command(self)


def closepath() -> Command:
    return Command(CommandType.CLOSEPATH)


def unsupported_reason(cmd: Command) -> str | None:
    """Why a stage that needs absolute, well-formed input must skip ``cmd``."""
    if cmd.is_relative:
        return "relative coordinates (convert_absolute is off)"
    if not cmd.is_well_formed:
        return f"{len(cmd.parameters)} parameters, expected a multiple of {cmd.arity}"
    return None


def advance(cmd: Command, current: Point, subpath_start: Point) -> tuple[Point, Point]:
    """Replay one command: return the (current point, subpath start) after it.

    Works for both polarities, so stages that pass a relative command through
    unchanged still keep an accurate pen position for the commands after it.
    Malformed trailing groups are ignored.
    """
    if cmd.type is CommandType.CLOSEPATH:
        return subpath_start, subpath_start

    rel = cmd.is_relative
    for i, group in enumerate(cmd.groups()):
        if len(group) != cmd.arity:
            break
        if cmd.type is CommandType.HORIZONTAL_LINETO:
            current = Point(group[0] + (current.x if rel else 0.0), current.y)
        elif cmd.type is CommandType.VERTICAL_LINETO:
            current = Point(current.x, group[0] + (current.y if rel else 0.0))
        else:
            x, y = group[-2], group[-1]
            if rel:
                x, y = x + current.x, y + current.y
            current = Point(x, y)
        if cmd.type is CommandType.MOVETO and i == 0:
            subpath_start = current
    return current, subpath_start


class Pen:
    """Running current point for one traversal of a command sequence."""

    def __init__(self) -> None:
        self.current = ORIGIN
        self.subpath_start = ORIGIN

    def walk(self, cmd: Command) -> Iterator[tuple[int, tuple[float, ...], Point]]:
        """Yield ``(index, group, start)`` for each complete group of ``cmd``.

        ``start`` is the current point before the group; the pen has moved
        past the group by the time the next one is yielded. Closepath yields
        nothing but still moves the pen back to the subpath start.
        """
        if cmd.type is CommandType.CLOSEPATH:
            self.move(cmd)
            return
        for i, group in enumerate(cmd.groups()):
            if len(group) != cmd.arity:
                return
            start = self.current
            yield i, group, start
            # Extra moveto pairs are implicit linetos and do not start a subpath
            step = CommandType.LINETO if cmd.type is CommandType.MOVETO and i > 0 else cmd.type
            self.current, self.subpath_start = advance(
                Command(step, cmd.polarity, group), start, self.subpath_start
            )

    def move(self, cmd: Command) -> None:
        self.current, self.subpath_start = advance(cmd, self.current, self.subpath_start)


class ControlTracker:
    """Last control point of the preceding curve, for smooth-curve reflection.

    Only the immediately preceding group counts: a cubic (C/S) feeds an S, a
    quadratic (Q/T) feeds a T, anything else clears both.
    """

    def __init__(self) -> None:
        self.cubic: Point | None = None
        self.quadratic: Point | None = None

    def step(self, cmd: Command, group: tuple[float, ...], start: Point) -> Point | None:
        """Record one group; return the implied first control point if it is S or T."""
        ox, oy = (start.x, start.y) if cmd.is_relative else (0.0, 0.0)
        implied = None
        if cmd.type is CommandType.CUBIC_CURVETO:
            self.cubic, self.quadratic = Point(group[2] + ox, group[3] + oy), None
        elif cmd.type is CommandType.SMOOTH_CUBIC_CURVETO:
            implied = Point(*reflect(self.cubic, start)) if self.cubic is not None else start
            self.cubic, self.quadratic = Point(group[0] + ox, group[1] + oy), None
        elif cmd.type is CommandType.QUADRATIC_CURVETO:
            self.cubic, self.quadratic = None, Point(group[0] + ox, group[1] + oy)
        elif cmd.type is CommandType.SMOOTH_QUADRATIC_CURVETO:
            implied = Point(*reflect(self.quadratic, start)) if self.quadratic is not None else start
            self.cubic, self.quadratic = None, implied
        else:
            self.reset()
        return implied

    def reset(self) -> None:
        self.cubic = self.quadratic = None


def final_point(commands: list[Command]) -> Point:
    """Pen position after replaying a whole command sequence."""
    pen = Pen()
    for cmd in commands:
        pen.move(cmd)
    return pen.current
