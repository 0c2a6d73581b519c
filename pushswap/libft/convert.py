"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_int(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, a single sign is honoured and parsing stops
    at the first non-digit. Text without digits gives 0; the result wraps
    around the 32-bit signed range.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    magnitude = int(digits) if digits else 0
    return _wrap_int(sign * magnitude)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)