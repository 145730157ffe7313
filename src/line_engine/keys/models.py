"""Key events produced by the raw input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ESC = 0x1B
CSI_BRACKET = ord("[")
DEL = 0x7F
NEWLINE = ord("\n")


def ctrl(letter: str) -> int:
    """Byte sent for control+``letter`` (``ctrl("a") == 0x01``)."""

    if len(letter) != 1 or not "a" <= letter <= "z":
        raise ValueError(f"Expected a lowercase letter, got {letter!r}")
    return ord(letter) - 0x60


def is_control_byte(byte: int) -> bool:
    return byte < 0x20 or byte == DEL


class KeyKind(str, Enum):
    CHARACTER = "character"
    CONTROL = "control"
    NOKEY = "nokey"
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One logical key press.

    ``byte`` is set for ``CHARACTER`` and ``CONTROL`` events only.
    """

    kind: KeyKind
    byte: Optional[int] = None

    def __post_init__(self) -> None:
        carries_byte = self.kind in (KeyKind.CHARACTER, KeyKind.CONTROL)
        if carries_byte and self.byte is None:
            raise ValueError(f"{self.kind.value} events require a byte")
        if not carries_byte and self.byte is not None:
            raise ValueError(f"{self.kind.value} events cannot carry a byte")
        if self.byte is not None and not 0 <= self.byte <= 0xFF:
            raise ValueError("byte must be in range 0..255")

    @classmethod
    def from_byte(cls, byte: int) -> "KeyEvent":
        kind = KeyKind.CONTROL if is_control_byte(byte) else KeyKind.CHARACTER
        return cls(kind, byte)

    @property
    def token(self) -> str:
        if self.byte is None:
            return self.kind.value
        if self.kind is KeyKind.CONTROL:
            if 1 <= self.byte <= 26:
                return f"ctrl+{chr(self.byte + 0x60)}"
            return f"0x{self.byte:02x}"
        return chr(self.byte)


NO_KEY = KeyEvent(KeyKind.NOKEY)
KEY_UP = KeyEvent(KeyKind.UP)
KEY_DOWN = KeyEvent(KeyKind.DOWN)
KEY_RIGHT = KeyEvent(KeyKind.RIGHT)
KEY_LEFT = KeyEvent(KeyKind.LEFT)


__all__ = [
    "ESC",
    "CSI_BRACKET",
    "DEL",
    "NEWLINE",
    "ctrl",
    "is_control_byte",
    "KeyKind",
    "KeyEvent",
    "NO_KEY",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_RIGHT",
    "KEY_LEFT",
]
