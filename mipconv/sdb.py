"""Simple key/value database stored as plain text."""

from __future__ import annotations

from typing import IO, Optional

from .textutils import read_logicline, split2

_KEY_SIZE = 32
_LINE_SIZE = 4096


class SimpleDatabase:
    """A text file of ``key value`` logical lines.

    Lines starting with ``#`` and blank lines are ignored; a trailing
    backslash continues a line. Opening a missing file raises OSError.
    """

    def __init__(self, path) -> None:
        self.path = path
        self._stream: Optional[IO[str]] = open(path, "r", encoding="utf-8")

    def read_item(self, item: str) -> Optional[str]:
        """Return the value of the first entry named *item*, or None."""
        stream = self._stream
        if stream is None:
            return None
        stream.seek(0)
        while True:
            line = read_logicline(stream, _LINE_SIZE)
            if line is None:
                return None
            if not line or line.startswith("#"):
                continue
            key, value = split2(line, " \t", _KEY_SIZE)
            if key == item:
                return value

    def close(self) -> None:
        """Close the underlying file; later lookups return None."""
        if self._stream is not None:
            self._stream.close()
        self._stream = None

    def __enter__(self) -> "SimpleDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.close()