"""Path-command conversion entry point."""

from __future__ import annotations

from pathcommand.engine.commands import Command, closepath
from pathcommand.engine.config import PathOptions
from pathcommand.engine.pipeline import create_pipeline
from pathcommand.svg.path_parser import tokenize
from pathcommand.svg.path_serializer import serialize_commands


def convert_path_commands(commands: str = "", options: PathOptions | None = None) -> str | list[Command]:
    """Convert path data to a more readable form.

    Returns the new ``d`` value, or the command list itself when
    ``options.return_structured`` is set. Input of zero or one character is
    read as a lone closepath. Raises ``PathParseError`` on non-numeric
    parameters.
    """
    options = options or PathOptions()

    if len(commands) <= 1:
        data = [closepath()]
    else:
        data = create_pipeline(options).run(tokenize(commands))

    if options.return_structured:
        return data
    return serialize_commands(
        data,
        add_line_breaks=options.add_line_breaks,
        correct_floating_point=options.correct_floating_point,
    )
