"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathcommand.engine.config import PathOptions
from pathcommand.engine.registry import register_transforms


# Path data samples

RELATIVE_PATH = "m10 10 l5 5 h10 v-5 z"

CHAINED_MOVETO_PATH = "m3 10 9-7 9 7"

SMOOTH_CUBIC_PATH = "M0,0 C10,0 20,10 20,20 S30,40 40,40"

SMOOTH_QUADRATIC_PATH = "M0,0 Q10,10 20,0 T40,0 60,0"

HALF_CIRCLE_PATH = "M0,0 A5,5 0 0 1 10,0"

# Lucide "settings" gear: every command is relative, lots of arcs
GEAR_PATH = (
    "M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08"
    "a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51"
    "a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08"
    "a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18"
    "a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39"
    "a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09"
    "a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25"
    "a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"
)

MIXED_PATH = "M10 80 q 30 -60 60 0 t 60 0 s 20 40 40 0 c 10 -20 30 -20 40 0 h 20 v 20 a 20 10 30 1 0 -40 0 z m 5 5 l 10 10"

# Sample SVGs

HOUSE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <!-- <path d="m1 1h2"/> -->
  <path id="roof" d="m3 10 9-7 9 7"/>
  <path d="M5 12v8h14v-8" fill="none"/>
  <g><path id="door" d='M10 20v-6h4v6'/></g>
  <circle cx="12" cy="12" r="3"/>
</svg>'''

FONT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs>
    <font id="f" horiz-adv-x="500">
      <missing-glyph d="M0,0 h500 v700 h-500 z"/>
      <glyph unicode="l" d="m100 0 h50 v700 h-50 z"/>
    </font>
  </defs>
</svg>'''

BROKEN_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path id="good" d="m0 0 l10 10"/>
  <path id="bad" d="M0,0 L#5"/>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"></svg>'


@pytest.fixture(scope="session", autouse=True)
def registered_transforms():
    register_transforms()


@pytest.fixture
def all_options() -> PathOptions:
    return PathOptions(
        split_chains=True,
        convert_lines=True,
        convert_smooth=True,
        convert_quadratic_to_cubic=True,
        convert_arc_to_cubic=True,
    )


@pytest.fixture
def diagnostics() -> list[str]:
    return []
