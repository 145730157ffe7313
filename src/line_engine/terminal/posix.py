"""``termios`` backed terminal for POSIX systems."""

from __future__ import annotations

import os
import sys
import termios
from typing import Any, List, Optional

from line_engine.errors import TerminalRestoreError, TerminalSetupError

from .base import Terminal

# Positions in the list returned by termios.tcgetattr.
_OFLAG = 1
_LFLAG = 3


class PosixTerminal(Terminal):
    """Reads and writes raw bytes on a pair of file descriptors."""

    def __init__(self, fd_in: Optional[int] = None, fd_out: Optional[int] = None) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self._saved: Optional[List[Any]] = None

    @property
    def saved_attributes(self) -> Optional[List[Any]]:
        return self._saved

    def capture(self) -> None:
        try:
            self._saved = termios.tcgetattr(self.fd_in)
        except (termios.error, OSError) as exc:
            raise TerminalSetupError(
                f"Unable to read terminal attributes for fd {self.fd_in}"
            ) from exc

    def enter_raw(self) -> None:
        if self._saved is None:
            self.capture()
        assert self._saved is not None
        raw = list(self._saved)
        raw[_OFLAG] &= termios.OPOST
        raw[_LFLAG] &= ~(termios.ECHO | termios.ICANON)
        try:
            termios.tcsetattr(self.fd_in, termios.TCSANOW, raw)
        except (termios.error, OSError) as exc:
            raise TerminalSetupError("Unable to switch terminal to raw mode") from exc

    def restore(self) -> None:
        if self._saved is None:
            return
        try:
            termios.tcsetattr(self.fd_in, termios.TCSANOW, self._saved)
        except (termios.error, OSError) as exc:
            raise TerminalRestoreError("Unable to restore terminal attributes") from exc

    def read(self, size: int) -> bytes:
        return os.read(self.fd_in, size)

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.fd_out, view)
            view = view[written:]


__all__ = ["PosixTerminal"]
