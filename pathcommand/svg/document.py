"""Document-level conversion — rewrite the path data of every path-bearing element.

The markup is checked for well-formedness with ElementTree, but the rewrite
itself splices new attribute values into the original text at the offsets
found while scanning, so everything outside those values stays byte-identical.
"""

from __future__ import annotations

import html
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace

from pathcommand.converter import convert_path_commands
from pathcommand.engine.config import PathOptions
from pathcommand.errors import DocumentParseError, PathParseError

logger = logging.getLogger(__name__)

# Elements whose d attribute holds path data (glyph outlines use the same syntax)
PATH_TAGS = {"path", "glyph", "missing-glyph"}

_TAG_NAMES = "|".join(sorted(PATH_TAGS, key=len, reverse=True))
_TAG_RE = re.compile(
    rf"""<(?P<tag>(?:[\w.-]+:)?(?:{_TAG_NAMES}))"""
    r"""(?P<attrs>(?:\s(?:[^"'>]|"[^"]*"|'[^']*')*)?)/?>"""
)
_ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_SKIP_RE = re.compile(r"<!--.*?-->|<!\[CDATA\[.*?\]\]>", re.DOTALL)


@dataclass
class PathElement:
    """One element carrying path data, with the location of its d value."""

    id: str
    tag: str
    d: str
    # (start, end) character offsets of the raw attribute value
    value_span: tuple[int, int]


def check_well_formed(svg_text: str) -> None:
    """Raise DocumentParseError if the markup cannot be parsed."""
    try:
        ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise DocumentParseError(f"Error reading the SVG document: {e}", e.position) from e


def _local_name(tag: str) -> str:
    return tag.split(":")[-1]


def find_path_elements(svg_text: str) -> list[PathElement]:
    """Locate path-bearing elements in document order.

    Elements are keyed by their ``id`` attribute; elements without one (or
    with an id already taken) get a positional id E1, E2, … by path order.
    """
    skipped = [m.span() for m in _SKIP_RE.finditer(svg_text)]
    elements: list[PathElement] = []
    seen_ids: set[str] = set()

    for match in _TAG_RE.finditer(svg_text):
        if any(start <= match.start() < end for start, end in skipped):
            continue

        attrs: dict[str, str] = {}
        d_span: tuple[int, int] | None = None
        base = match.start("attrs")
        for attr in _ATTR_RE.finditer(match.group("attrs")):
            group = 2 if attr.group(2) is not None else 3
            attrs[attr.group(1)] = attr.group(group)
            if attr.group(1) == "d":
                d_span = (base + attr.start(group), base + attr.end(group))

        if d_span is None:
            continue

        element_id = attrs.get("id") or ""
        if not element_id or element_id in seen_ids:
            element_id = f"E{len(elements) + 1}"
            while element_id in seen_ids:
                element_id += "'"
        seen_ids.add(element_id)

        elements.append(
            PathElement(
                id=element_id,
                tag=_local_name(match.group("tag")),
                d=html.unescape(attrs["d"]),
                value_span=d_span,
            )
        )

    return elements


def _convert_element(element: PathElement, options: PathOptions) -> str | None:
    try:
        return convert_path_commands(element.d, options)
    except PathParseError as e:
        options.report(f"Failed to parse path {element.id}: {e}", logging.WARNING)
        return None


def convert_path_elements(svg_text: str, options: PathOptions | None = None) -> dict[str, str]:
    """Map element id → converted path data for every path-bearing element.

    An element whose data cannot be parsed maps to its original data.
    """
    options = replace(options or PathOptions(), return_structured=False)
    check_well_formed(svg_text)

    result: dict[str, str] = {}
    for element in find_path_elements(svg_text):
        converted = _convert_element(element, options)
        result[element.id] = element.d if converted is None else converted
    return result


def convert_svg_document(svg_text: str, options: PathOptions | None = None) -> str:
    """Return the document with every path-bearing element's d attribute converted.

    Raises DocumentParseError if the markup is not well-formed.
    """
    options = replace(options or PathOptions(), return_structured=False)
    check_well_formed(svg_text)

    splices: list[tuple[int, int, str]] = []
    for element in find_path_elements(svg_text):
        converted = _convert_element(element, options)
        if converted is None:
            continue
        start, end = element.value_span
        splices.append((start, end, converted))

    logger.info("Converted %d path elements", len(splices))

    # Splice back to front so earlier offsets stay valid
    result = svg_text
    for start, end, value in sorted(splices, reverse=True):
        result = result[:start] + value + result[end:]
    return result
