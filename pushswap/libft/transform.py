"""Building new strings from NUL-terminated text: copies, slices, joins and splits."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from pushswap.libft.strings import strlen

_NUL = "\0"


def _text(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s[: strlen(s)]


def _separator(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strdup(s: Optional[str]) -> Optional[str]:
    """Return a copy of ``s`` up to its terminator; None gives None."""
    if s is None:
        return None
    return _text(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string; None gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    text = _text(s)
    start = min(start, len(text))
    return text[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return ``s1`` followed by ``s2``; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return _text(s1) + _text(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove the characters of ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    return _text(s).strip(_text(charset))


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Return a string whose characters are ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(_text(s)))


def striteri(
    s: Optional[MutableSequence],
    f: Optional[Callable[[int, MutableSequence], None]],
) -> None:
    """Call ``f(index, s)`` for each position of the mutable character buffer ``s``.

    ``f`` may change ``s[index]`` in place. A NUL element ends the buffer.
    """
    if s is None or f is None:
        return
    for index, item in enumerate(s):
        if item in (_NUL, 0):
            break
        f(index, s)


def split(s: Optional[str], c: Union[int, str]) -> Optional[List[str]]:
    """Split ``s`` on the separator ``c``, dropping empty words; None gives None."""
    if s is None:
        return None
    sep = _separator(c)
    text = _text(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]