"""Path data tokenizer — raw ``d`` string → list of Command.

Pure lexical grouping: letters start commands, everything between two
letters is that command's parameter list. No relative/absolute handling and
no arity checks happen here.
"""

from __future__ import annotations

import logging
import math
import re

from pathcommand.engine.commands import COMMAND_LETTERS, Command, closepath
from pathcommand.errors import PathParseError

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# A sign starts a new number unless it belongs to an exponent (1e-5)
_SIGN_RE = re.compile(r"(?<![eE])([-+])")
_COMMA_RUN_RE = re.compile(r",{2,}")
_COMMAND_RE = re.compile(f"[{COMMAND_LETTERS}]")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def normalize_separators(commands: str) -> str:
    """Rewrite every implicit or explicit separator as a single comma.

    'M10-20 30 40' → 'M10,-20,30,40'
    """
    data = _WHITESPACE_RE.sub(",", commands)
    data = _SIGN_RE.sub(r",\1", data)
    return _COMMA_RUN_RE.sub(",", data)


def parse_number(token: str, command: str = "") -> float:
    if not _NUMBER_RE.fullmatch(token):
        raise PathParseError(
            f"Unable to parse {token!r} as a number in command {command!r}",
            token=token,
            command=command,
        )
    value = float(token)
    if not math.isfinite(value):
        raise PathParseError(
            f"Number {token!r} in command {command!r} is out of range",
            token=token,
            command=command,
        )
    return value


def split_parameters(blob: str, command: str = "") -> list[float]:
    """Parse a comma-separated parameter blob.

    A piece with several decimal points is a run of short decimals sharing an
    implicit leading zero: '1.2.3' → 1.2, 0.3 and '.5.5' → 0.5, 0.5.
    """
    values: list[float] = []
    for piece in blob.strip(",").split(","):
        if not piece:
            continue
        if piece.count(".") > 1:
            head, first, *rest = piece.split(".")
            values.append(parse_number(f"{head}.{first}", command))
            values.extend(parse_number(f"0.{part}", command) for part in rest)
        else:
            values.append(parse_number(piece, command))
    return values


def tokenize(commands: str) -> list[Command]:
    """Split path data into commands. No command letter at all → a lone closepath."""
    data = normalize_separators(commands)
    letters = list(_COMMAND_RE.finditer(data))
    if not letters:
        logger.debug("No path commands in %r", commands[:40])
        return [closepath()]

    result: list[Command] = []
    for i, match in enumerate(letters):
        end = letters[i + 1].start() if i + 1 < len(letters) else len(data)
        letter = match.group(0)
        blob = data[match.end():end]
        result.append(Command.from_letter(letter, split_parameters(blob, letter + blob.strip(","))))

    return result
