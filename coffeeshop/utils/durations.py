"""
==============================================================================
Duration Parsing Module
==============================================================================

Parses human-readable duration strings into seconds.

Format:
-------
A sequence of decimal numbers, each with an optional fraction and a
mandatory unit suffix. The bare string "0" is also accepted.

    "100ms"    -> 0.1
    "2s"       -> 2.0
    "1m30s"    -> 90.0
    "1.5h"     -> 5400.0

Valid units: "ns", "us" (or "µs"), "ms", "s", "m", "h".
Surrounding whitespace is rejected.

==============================================================================
"""

from __future__ import annotations

import re
from typing import Dict

from coffeeshop.core.exceptions import ConfigurationError


_UNITS: Dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

# Longest units first so "ms" is not read as "m" followed by "s".
_COMPONENT = re.compile(
    r"(\d+(?:\.\d*)?|\.\d+)("
    + "|".join(sorted((re.escape(u) for u in _UNITS), key=len, reverse=True))
    + r")"
)


def parse_duration(value: str) -> float:
    """
    Parse a duration string into seconds.

    Args:
        value: Duration string such as "2s" or "100ms"

    Returns:
        Duration in seconds

    Raises:
        ConfigurationError: If the string is not a valid non-negative duration

    Example:
        >>> parse_duration("1m30s")
        90.0
    """
    if not isinstance(value, str):
        raise ConfigurationError(f"invalid duration {value!r}: not a string")

    text = value
    if text.startswith("+"):
        text = text[1:]

    if text == "0":
        return 0.0

    if not text:
        raise ConfigurationError(f"invalid duration {value!r}")

    if text.startswith("-"):
        raise ConfigurationError(f"invalid duration {value!r}: must not be negative")

    total = 0.0
    position = 0

    while position < len(text):
        match = _COMPONENT.match(text, position)
        if match is None:
            if text[position].isdigit() or text[position] == ".":
                raise ConfigurationError(f"missing unit in duration {value!r}")
            raise ConfigurationError(f"invalid duration {value!r}")

        number, unit = match.groups()
        total += float(number) * _UNITS[unit]
        position = match.end()

    return total
