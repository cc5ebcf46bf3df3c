"""Conversion options — which optional stages run and how output is written."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathOptions:
    """Read-only switches for one conversion.

    ``diagnostics`` receives a message whenever a stage has to pass a command
    through untouched (relative input to a stage that needs absolute
    coordinates, wrong parameter count). Without a sink the messages only go
    to the DEBUG log, so conversion is silent by default.
    """

    convert_absolute: bool = True
    split_chains: bool = False
    convert_lines: bool = False
    convert_smooth: bool = False
    convert_quadratic_to_cubic: bool = False
    convert_arc_to_cubic: bool = False
    add_line_breaks: bool = False
    return_structured: bool = False
    correct_floating_point: bool = False

    diagnostics: Callable[[str], None] | None = None

    @classmethod
    def flag_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.type in ("bool", bool)]

    def enabled(self, flag: str | None) -> bool:
        """Is the stage gated by ``flag`` switched on? ``None`` = always runs."""
        return flag is None or bool(getattr(self, flag))

    def report(self, message: str, level: int = logging.DEBUG) -> None:
        logger.log(level, message)
        if self.diagnostics is not None:
            self.diagnostics(message)
