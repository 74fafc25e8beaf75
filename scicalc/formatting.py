"""Display string <-> float conversion."""

import math

import numpy as np

# ----------------------------
# Number formatting
# ----------------------------
# Same ranges a browser uses when printing a double: positional between 1e-6
# and 1e21, exponent form outside.
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


def format_number(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if _POSITIONAL_MIN <= abs(value) < _POSITIONAL_MAX:
        return np.format_float_positional(value, trim="-")
    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{int(exponent):+d}"


def parse_number(text: str) -> float:
    """Read a display string back as a float; anything unreadable is NaN."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return math.nan


def is_numeral(text: str) -> bool:
    # "Infinity" parses as a float but is not something to keep editing
    return math.isfinite(parse_number(text)) and text not in ("", "-", "+")
