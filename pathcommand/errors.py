"""Error types raised by path and document conversion."""

from __future__ import annotations


class PathCommandError(Exception):
    """Base class for conversion failures."""


class PathParseError(PathCommandError, ValueError):
    """Path data contains text that is not a number."""

    def __init__(self, message: str, token: str = "", command: str = "") -> None:
        super().__init__(message)
        self.token = token
        self.command = command


class DocumentParseError(PathCommandError):
    """Markup document is not well-formed."""

    def __init__(self, message: str, position: tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.position = position
