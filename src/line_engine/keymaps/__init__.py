"""Fixed key table mapping decoded keys to editing actions."""

from .models import ActionRef, Binding
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, INSERT_ACTION_ID
from .resolver import DEFAULT_KEYMAP, Keymap

__all__ = [
    "ActionRef",
    "Binding",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "DEFAULT_KEYMAP",
    "INSERT_ACTION_ID",
    "Keymap",
]
