"""Number formatting for path output. No engine imports."""

from __future__ import annotations

import re

# Six or more repeated 0s / 9s in the fractional digits = binary float noise
_FLOAT_NOISE_RE = re.compile(r"0{6,}|9{6,}")

# Integers beyond this are printed through repr() to stay exact
_MAX_PLAIN_INT = 1e15


def format_number(value: float) -> str:
    """Shortest text for a parameter: 10.0 → '10', 0.5 → '0.5'."""
    value = float(value)
    if value.is_integer() and abs(value) < _MAX_PLAIN_INT:
        return str(int(value))
    return repr(float(value))


def correct_float(value: float) -> float:
    """Undo binary floating-point artifacts in a single value.

    If the fractional digits contain a run of six or more 0s or 9s, round to
    the number of decimal places in front of the run:
    10.999999999 → 11, 0.29999999999999993 → 0.3, 1.50000000001 → 1.5.
    Values in exponent notation are returned unchanged.
    """
    text = repr(float(value))
    if "e" in text or "E" in text or "." not in text:
        return value
    fraction = text.split(".", 1)[1]
    match = _FLOAT_NOISE_RE.search(fraction)
    if match is None:
        return value
    rounded = round(value, match.start())
    # round() keeps -0.0; the sign carries no geometry
    return rounded + 0.0
