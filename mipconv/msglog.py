"""Leveled message logging to a stream or a file."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import IO, Callable, Optional


class Level(IntEnum):
    """Message levels, from least to most severe."""

    INFO = 0
    NOTICE = 1
    WARN = 2
    ERR = 3
    SYSERR = 4


_LABELS = {
    Level.INFO: "INFO: ",
    Level.NOTICE: "NOTICE: ",
    Level.WARN: "WARN: ",
    Level.ERR: "ERROR: ",
    Level.SYSERR: "ERROR: ",
}

_LEVEL_NAMES = {
    "verbose": Level.INFO,
    "normal": Level.NOTICE,
    "quiet": Level.WARN,
    "silent": Level.ERR,
}

_NAME_SIZE = 32

PrefixFunc = Callable[[IO[str], int], None]


class MessageLogger:
    """Writes messages at or above a threshold level to an output stream."""

    def __init__(self, stream: Optional[IO[str]] = None, name: Optional[str] = None):
        self._output: Optional[IO[str]] = None
        self._owned = False
        self.name = ""
        self.level = Level.NOTICE
        self._prefix: PrefixFunc = self._default_prefix
        if stream is not None:
            self.open(stream, name)

    def _set_name(self, name: Optional[str]) -> None:
        self.name = f"{name}: "[: _NAME_SIZE - 1] if name else ""

    def _default_prefix(self, stream: IO[str], level: int) -> None:
        stamp = time.strftime("[%Y-%m-%d %H:%M:%S %Z] ", time.localtime())
        label = _LABELS.get(level, "") if 0 <= level < len(_LABELS) else ""
        stream.write(f"{stamp}{self.name}{label}")

    def set_prefix_func(self, func: Optional[PrefixFunc]) -> None:
        """Use *func(stream, level)* to write prefixes; None restores the default."""
        self._prefix = func if func is not None else self._default_prefix

    def close(self) -> None:
        """Stop logging, closing the output if it was opened here."""
        if self._owned and self._output is not None:
            self._output.close()
        self._output = None
        self._owned = False

    def open(self, stream: IO[str], name: Optional[str] = None) -> None:
        """Log to an already open *stream*."""
        self.close()
        self._output = stream
        self._owned = False
        self._set_name(name)

    def open_file(self, path, name: Optional[str] = None, append: bool = False) -> None:
        """Log to the file at *path*; raises OSError if it cannot be opened."""
        self.close()
        self._output = open(path, "a" if append else "w", encoding="utf-8")
        self._owned = True
        self._set_name(name)

    def set_level(self, name: str) -> None:
        """Set the threshold by name: verbose, normal, quiet or silent.

        Unknown names leave the threshold unchanged.
        """
        if name in _LEVEL_NAMES:
            self.level = _LEVEL_NAMES[name]

    def log(self, level: int, message: Optional[str]) -> None:
        """Write *message* if *level* reaches the threshold.

        At SYSERR level the description of the OSError being handled,
        if any, is appended.
        """
        output = self._output
        if output is None or level < self.level:
            return
        self._prefix(output, int(level))
        if message is not None:
            output.write(message)
        if level == Level.SYSERR:
            error = sys.exc_info()[1]
            if isinstance(error, OSError) and error.strerror:
                output.write(f": {error.strerror}" if message is not None else error.strerror)
        output.write("\n")

    def __enter__(self) -> "MessageLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()