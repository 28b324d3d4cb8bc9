"""Parsing helpers for raw numeric form input."""

import math
import re


_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity",
    re.ASCII,
)

# Unsigned hex, octal and binary integer literals.
_RADIX_PATTERN = re.compile(
    r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+",
    re.ASCII,
)


def parse_number(raw) -> float:
    """Convert raw form input into a float.

    Surrounding whitespace is ignored and an empty value reads as zero.
    Decimal numbers use ASCII digits only; ``0x``, ``0o`` and ``0b``
    prefixes read as unsigned integers. Anything else becomes NaN, which
    fails every numeric comparison downstream.

    Args:
        raw: Text typed by the user, or an already numeric value.

    Returns:
        float: Parsed value, or NaN when the input is not a number.
    """
    if isinstance(raw, bool) or raw is None:
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if _RADIX_PATTERN.fullmatch(text):
        return float(int(text, 0))
    if not _NUMBER_PATTERN.fullmatch(text):
        return math.nan
    return float(text.replace("Infinity", "inf"))


__all__ = ["parse_number"]
