"""svg-path-command — normalize and reformat SVG path data."""

from pathcommand.converter import convert_path_commands
from pathcommand.engine.commands import Command, CommandType, Point, Polarity
from pathcommand.engine.config import PathOptions
from pathcommand.errors import DocumentParseError, PathCommandError, PathParseError
from pathcommand.svg.document import PathElement, convert_path_elements, convert_svg_document, find_path_elements

__version__ = "0.1.0"

__all__ = [
    "convert_path_commands",
    "convert_svg_document",
    "convert_path_elements",
    "find_path_elements",
    "PathElement",
    "PathOptions",
    "Command",
    "CommandType",
    "Polarity",
    "Point",
    "PathCommandError",
    "PathParseError",
    "DocumentParseError",
]
