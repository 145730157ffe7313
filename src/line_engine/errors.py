"""Exception hierarchy shared by the buffer, terminal, and editor layers."""

from __future__ import annotations


class LineEngineError(RuntimeError):
    """Base class for every failure raised by ``line_engine``."""


class BufferAllocationError(LineEngineError):
    """Raised when the gap buffer cannot acquire or grow its storage."""

    def __init__(self, message: str, *, requested: int | None = None) -> None:
        super().__init__(message)
        self.requested = requested


class BufferReleasedError(LineEngineError):
    """Raised when a gap buffer is used after its storage was released."""


class TerminalError(LineEngineError):
    """Base class for terminal collaborator failures."""


class TerminalSetupError(TerminalError):
    """Raised when terminal attributes cannot be read or switched to raw mode."""


class TerminalRestoreError(TerminalError):
    """Raised when the saved terminal attributes cannot be put back."""


__all__ = [
    "LineEngineError",
    "BufferAllocationError",
    "BufferReleasedError",
    "TerminalError",
    "TerminalSetupError",
    "TerminalRestoreError",
]
