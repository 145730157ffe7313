"""Terminal services the line editor relies on."""

from __future__ import annotations

from contextlib import contextmanager
from typing import ContextManager, Iterator, Protocol, runtime_checkable

from line_engine.errors import TerminalRestoreError
from line_engine.runtime import telemetry


@runtime_checkable
class TerminalIO(Protocol):
    """Opaque terminal services used by a line editing session."""

    def capture(self) -> None:
        """Remember the current terminal attributes."""
        ...

    def enter_raw(self) -> None:
        """Disable echo and line buffering."""
        ...

    def restore(self) -> None:
        """Put back the attributes saved by :meth:`capture`."""
        ...

    def raw_mode(self) -> ContextManager[None]:
        """Raw mode for the duration of a ``with`` block."""
        ...

    def read(self, size: int) -> bytes:
        """Blocking read of at most ``size`` bytes; ``b""`` at end of input."""
        ...

    def write(self, data: bytes) -> None:
        """Write ``data`` and flush it immediately."""
        ...


class Terminal:
    """Shared behaviour for concrete terminals.

    Subclasses supply ``capture``, ``enter_raw``, ``restore``, ``read`` and
    ``write``.
    """

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Capture, switch to raw mode, and always restore on the way out.

        A restore failure after an error in the block is logged and the
        block's error propagates. After a clean block it is logged and raised.
        """

        self.capture()
        self.enter_raw()
        failed = False
        try:
            yield
        except BaseException:
            failed = True
            raise
        finally:
            try:
                self.restore()
            except TerminalRestoreError as exc:
                telemetry.record_event(
                    "terminal.restore_failed", level="error", data={"error": str(exc)}
                )
                if not failed:
                    raise

    def capture(self) -> None:
        raise NotImplementedError

    def enter_raw(self) -> None:
        raise NotImplementedError

    def restore(self) -> None:
        raise NotImplementedError


__all__ = ["Terminal", "TerminalIO"]
