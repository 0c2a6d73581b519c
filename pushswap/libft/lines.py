"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Optional

DEFAULT_BUFFER_SIZE = 1984


class LineReader:
    """Hands out the lines of file descriptors, one call at a time.

    Text read past the end of a line is kept per descriptor, so several
    descriptors may be read in turn without losing data.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def forget(self, fd: int) -> None:
        """Drop whatever has been read ahead from ``fd``."""
        self._pending.pop(fd, None)

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of ``fd``, newline included, or None at the end.

        A descriptor that cannot be read, a negative descriptor or a buffer
        size below 1 gives None; the text held for that descriptor is dropped.
        """
        if fd < 0:
            return None
        if self.buffer_size <= 0 or not self._readable(fd):
            self.forget(fd)
            return None
        text = self._pending.pop(fd, b"")
        try:
            while b"\n" not in text:
                chunk = os.read(fd, self.buffer_size)
                if not chunk:
                    break
                text += chunk
        except OSError:
            return None
        if not text:
            return None
        line, newline, rest = text.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + newline

    @staticmethod
    def _readable(fd: int) -> bool:
        try:
            os.read(fd, 0)
        except OSError:
            return False
        return True