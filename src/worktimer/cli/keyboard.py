"""Non-blocking keyboard input for the timer screen."""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from typing import TextIO

_READ_SIZE = 1024


class TerminalError(Exception):
    """Raised when stdin cannot be used as an interactive terminal."""


class KeyboardReader:
    """Reads single key presses from a terminal in cbreak mode.

    Signals stay enabled, so ctrl+c still raises ``KeyboardInterrupt``.
    The original terminal settings are restored by :meth:`close`.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdin
        if not self._stream.isatty():
            raise TerminalError("stdin is not a terminal")
        self._fd: int = self._stream.fileno()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            self._old_settings = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except termios.error as exc:
            raise TerminalError(f"could not configure terminal: {exc}") from exc

    def __enter__(self) -> KeyboardReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def read_keys(self) -> list[str]:
        """Return every key waiting on the terminal, without blocking."""
        keys: list[str] = []
        # Raw fd reads; a buffered stream would hide pending bytes from select.
        while select.select([self._fd], [], [], 0)[0]:
            data = os.read(self._fd, _READ_SIZE)
            if not data:
                break
            keys.extend(self._decoder.decode(data))
        return keys

    def close(self) -> None:
        """Restore the terminal settings captured at construction."""
        if self._old_settings is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
            self._old_settings = None
