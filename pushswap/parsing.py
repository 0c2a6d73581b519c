"""Checking and converting the numbers given on the command line."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, List, Optional

from pushswap.libft.chars import isdigit
from pushswap.libft.convert import INT_MAX, INT_MIN

NOT_A_NUMBER = "Error: Argument not a number"
OUT_OF_BOUNDS = "Error: Argument out of int bounds"
DUPLICATE = "Error: Duplicate arguments"

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """The arguments cannot be sorted; the message, if any, explains why.

    An input with no numbers at all raises it with an empty message.
    """


def is_number(text: str) -> bool:
    """True when ``text`` is an optional minus sign followed only by digits.

    A bare minus sign or an empty string also passes.
    """
    body = text[1:] if text.startswith("-") else text
    return all(isdigit(ch) for ch in body)


def parse_long(text: Optional[str]) -> int:
    """Parse a leading decimal integer: whitespace, one sign, then digits.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    return sign * int(digits) if digits else 0


def split_words(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty words.

    Raises InputError with an empty message when there are no words.
    """
    words = [word for word in text.split(sep) if word]
    if not words:
        raise InputError()
    return words


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn the argument strings into distinct 32-bit integers, in order."""
    numbers: List[int] = []
    seen = set()
    for arg in args:
        if not is_number(arg):
            raise InputError(NOT_A_NUMBER)
        value = parse_long(arg)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(OUT_OF_BOUNDS)
        if value in seen:
            raise InputError(DUPLICATE)
        seen.add(value)
        numbers.append(value)
    return numbers