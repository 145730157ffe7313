"""Key events and the raw input decoder."""

from .decoder import KeyReader, decode
from .models import KeyEvent, KeyKind, NO_KEY, ctrl

__all__ = [
    "KeyEvent",
    "KeyKind",
    "KeyReader",
    "NO_KEY",
    "ctrl",
    "decode",
]
