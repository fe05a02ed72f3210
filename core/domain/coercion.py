"""
Input coercion helpers.

Generator payloads arrive as loosely typed form values or JSON. These helpers
turn them into the integers and strings the domain works with, following the
lenient rules legacy API clients rely on.
"""
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from django.utils.html import strip_tags

NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")
PERCENT_OCTET = re.compile(r"%[a-fA-F0-9]{2}")
WHITESPACE_RUN = re.compile(r"[\r\n\t ]+")
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is a number or a numeric string.

    Booleans are not numeric. Floats must be finite.

    Args:
        value: Raw input value

    Returns:
        True if the value is numeric
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return bool(NUMERIC_STRING.match(value))
    return False


def absint(value: Any) -> int:
    """
    Convert a value to a non-negative integer.

    Numeric strings are read in full ("1e3" -> 1000, "4.9" -> 4), other strings
    by their leading integer ("12abc" -> 12). Anything else is 0.

    Args:
        value: Raw input value

    Returns:
        Absolute integer value
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return abs(int(value))
    if isinstance(value, str):
        if NUMERIC_STRING.match(value):
            try:
                return abs(int(Decimal(value.strip())))
            except (InvalidOperation, OverflowError):
                return 0
        match = LEADING_INTEGER.match(value)
        if match:
            return abs(int(match.group(1)))
    return 0


def sanitize_text_field(value: Any) -> str:
    """
    Clean a single-line text value.

    Strips tags and percent-encoded octets, collapses whitespace and
    control characters, and trims the result.

    Args:
        value: Raw input value

    Returns:
        Sanitized string
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        value = "1" if value else ""
    text = strip_tags(str(value))

    while PERCENT_OCTET.search(text):
        text = PERCENT_OCTET.sub("", text)

    text = WHITESPACE_RUN.sub(" ", text)
    text = CONTROL_CHARS.sub("", text)
    return text.strip()

