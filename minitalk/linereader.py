"""Reading text one line at a time from file descriptors."""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader:
    """Reads lines from any number of descriptors, buffering per descriptor."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int, clear: bool = False) -> Optional[str]:
        """Return the next line of ``fd`` with its newline, or None at the end.

        With ``clear`` set, whatever was read past the returned line is
        dropped. Unreadable descriptors raise OSError.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        os.read(fd, 0)
        pending = self._pending.get(fd, b"")
        while b"\n" not in pending:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        end = pending.find(b"\n")
        if end >= 0:
            line, rest = pending[: end + 1], pending[end + 1 :]
        else:
            line, rest = pending, b""
        if end < 0 or clear:
            self._pending.pop(fd, None)
        else:
            self._pending[fd] = rest
        if not line:
            return None
        return line.decode("utf-8", errors="replace")


_reader = LineReader()


def get_next_line(fd: int, clear: bool = False) -> Optional[str]:
    """Read the next line of ``fd`` using a shared reader."""
    return _reader.read_line(fd, clear)