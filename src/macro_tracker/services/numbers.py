"""Lenient parsing and rounding for numbers typed into the form."""

import math
import re

_DECIMAL_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal(value: str) -> float | None:
    """Parse the leading decimal number in value.

    Surrounding whitespace is ignored and trailing text after the number is
    dropped, so ``"70kg"`` parses as ``70.0``. Returns None when no number
    leads the string.
    """
    match = _DECIMAL_PREFIX.match(value.strip())
    if match is None:
        return None
    return float(match.group(0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)
