"""Measuring, searching, comparing and bounded copying of NUL-terminated text.

Strings behave like C strings: an embedded NUL character ends them. Positions
are returned as indexes into the string instead of pointers, and ``None``
means "not found".
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    return s.split(_NUL, 1)[0]


def _char(c: Union[int, str]) -> str:
    """Return ``c`` as a one-character string, truncating ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s`` up to its terminator; ``None`` has length 0."""
    if s is None:
        return 0
    return len(_cstr(s))


def strchr(s: Optional[str], c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: Optional[str], c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator, at ``strlen(s)``.
    """
    if s is None:
        return None
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, else 0."""
    for a, b in zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters of two strings, as ``strcmp`` does."""
    _check_size(n, "n")
    if n == 0 or (s1 is None and s2 is None):
        return 0
    if s1 is None or s2 is None:
        raise TypeError("cannot compare a string with None")
    return strcmp(_cstr(s1)[:n], _cstr(s2)[:n])


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within the first ``length`` characters.

    An empty needle is found at 0. Either string being None gives None.
    """
    _check_size(length, "length")
    if haystack is None or needle is None:
        return None
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = _cstr(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; a result length
    at least ``dstsize`` means the copy was truncated. A size of 0 copies nothing.
    """
    _check_size(dstsize, "dstsize")
    text = _cstr(src)
    copied = text[: dstsize - 1] if dstsize > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer it is left unchanged and
    the length reported is ``dstsize + len(src)``.
    """
    _check_size(dstsize, "dstsize")
    head = _cstr(dst)
    tail = _cstr(src)
    if dstsize <= len(head):
        return head, dstsize + len(tail)
    room = dstsize - len(head) - 1
    return head + tail[:room], len(head) + len(tail)