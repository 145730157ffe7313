"""Editing verbs bound to keys by the default keymap."""

from .core import (
    delete_backward,
    delete_forward,
    insert_byte,
    jump_to_end,
    jump_to_start,
    kill_line,
    move_left,
    move_right,
)

__all__ = [
    "move_left",
    "move_right",
    "jump_to_start",
    "jump_to_end",
    "delete_forward",
    "delete_backward",
    "kill_line",
    "insert_byte",
]
