"""
Percentage parsing for numeric gauge regions.

Turns free-form user input ("75%", "0.5", "75,5") into a value in [0, 100].
"""

import math
import re
from typing import Optional

_LETTERS_ONLY = re.compile(r"^[a-zA-Zа-яА-Я\s]+$")
_NON_NUMERIC = re.compile(r"[^\d.,]", re.ASCII)
_FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)


def format_percentage(value: float) -> str:
    """Shortest decimal form: 75.0 -> "75", 75.5 -> "75.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def clamp_percentage(value: float) -> float:
    return min(max(value, 0.0), 100.0)


def parse_percentage(text: Optional[str]) -> Optional[float]:
    """
    Parse user text into a percentage.

    Values above 1 are taken as percentages already, values up to 1 as
    fractions. Returns None when the text carries no usable number.

    Args:
        text: Raw text from the region

    Returns:
        Percentage in [0, 100], or None
    """
    if not text or not isinstance(text, str):
        return None

    trimmed = text.strip()
    if not trimmed:
        return None

    if _LETTERS_ONLY.match(trimmed):
        return None

    cleaned = _NON_NUMERIC.sub("", trimmed)
    if not cleaned:
        return None

    # Lenient parse: only the leading numeric part counts ("1.2.3" -> 1.2)
    match = _FLOAT_PREFIX.match(cleaned.replace(",", "."))
    if not match:
        return None
    number = float(match.group(0))

    if not math.isfinite(number) or number < 0:
        return None

    if number > 1:
        return clamp_percentage(number)
    return clamp_percentage(number * 100)
