"""Raw keystroke decoding with a fixed three byte lookahead."""

from __future__ import annotations

from typing import Mapping

from line_engine.runtime import telemetry
from line_engine.terminal.base import TerminalIO

from .models import (
    CSI_BRACKET,
    ESC,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    NO_KEY,
    KeyEvent,
)

LOOKAHEAD = 3

ARROW_FINALS: Mapping[int, KeyEvent] = {
    ord("A"): KEY_UP,
    ord("B"): KEY_DOWN,
    ord("C"): KEY_RIGHT,
    ord("D"): KEY_LEFT,
}

_SPLIT_PREFIXES = (bytes([ESC]), bytes([ESC, CSI_BRACKET]))


def decode(raw: bytes) -> KeyEvent:
    """Turn one read of up to three bytes into a key event.

    Only ``ESC [ A``..``ESC [ D`` are recognised as sequences; any other
    three byte escape decodes to ``NO_KEY``. Everything else yields its first
    byte.
    """

    if not raw:
        return NO_KEY
    if len(raw) < LOOKAHEAD or raw[0] != ESC or raw[1] != CSI_BRACKET:
        return KeyEvent.from_byte(raw[0])
    return ARROW_FINALS.get(raw[2], NO_KEY)


def consumed_length(raw: bytes) -> int:
    """How many bytes of ``raw`` the event returned by :func:`decode` used."""

    if not raw:
        return 0
    if len(raw) >= LOOKAHEAD and raw[0] == ESC and raw[1] == CSI_BRACKET:
        return LOOKAHEAD
    return 1


class KeyReader:
    """Pulls key events from a terminal, one read per event.

    Bytes that arrive in the same read as a plain key (pasted text, fast
    typing) are kept and decoded on the next call instead of being lost.
    """

    def __init__(self, terminal: TerminalIO) -> None:
        self.terminal = terminal
        self._pending = b""

    @property
    def pending(self) -> bytes:
        return self._pending

    def _read(self, size: int) -> bytes | None:
        try:
            return self.terminal.read(size)
        except OSError as exc:
            telemetry.record_event(
                "input.read_failed", level="warning", data={"error": str(exc)}
            )
            return None

    def read_key(self) -> KeyEvent:
        if self._pending:
            raw = self._pending
            if raw in _SPLIT_PREFIXES:
                # Escape sequence cut off at the end of the previous read.
                raw += self._read(LOOKAHEAD - len(raw)) or b""
        else:
            fresh = self._read(LOOKAHEAD)
            if fresh is None:
                return NO_KEY
            if not fresh:
                raise EOFError("Terminal input closed")
            raw = fresh

        window = raw[:LOOKAHEAD]
        self._pending = raw[consumed_length(window) :]
        return decode(window)


__all__ = ["LOOKAHEAD", "ARROW_FINALS", "decode", "consumed_length", "KeyReader"]
