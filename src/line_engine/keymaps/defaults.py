"""Built-in key table of the line editor."""

from __future__ import annotations

from line_engine.actions import core as core_actions
from line_engine.keys.models import (
    DEL,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    KeyEvent,
    ctrl,
)

from .models import ActionRef, Binding

INSERT_ACTION_ID = "edit.insert"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="cursor.left",
        handler=core_actions.move_left,
        description="Move the cursor one byte left",
    ),
    ActionRef(
        id="cursor.right",
        handler=core_actions.move_right,
        description="Move the cursor one byte right",
    ),
    ActionRef(
        id="cursor.start",
        handler=core_actions.jump_to_start,
        description="Jump to the start of the line",
    ),
    ActionRef(
        id="cursor.end",
        handler=core_actions.jump_to_end,
        description="Jump to the end of the line",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=core_actions.delete_forward,
        description="Delete the byte under the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the byte before the cursor",
    ),
    ActionRef(
        id="edit.kill_line",
        handler=core_actions.kill_line,
        description="Discard the whole line",
    ),
    ActionRef(
        id=INSERT_ACTION_ID,
        handler=core_actions.insert_byte,
        description="Insert the typed byte at the cursor",
    ),
)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(KEY_LEFT, "cursor.left"),
    Binding(KeyEvent.from_byte(ctrl("b")), "cursor.left"),
    Binding(KEY_RIGHT, "cursor.right"),
    Binding(KeyEvent.from_byte(ctrl("f")), "cursor.right"),
    Binding(KEY_UP, "cursor.start"),
    Binding(KeyEvent.from_byte(ctrl("a")), "cursor.start"),
    Binding(KEY_DOWN, "cursor.end"),
    Binding(KeyEvent.from_byte(ctrl("e")), "cursor.end"),
    Binding(KeyEvent.from_byte(ctrl("d")), "edit.delete_forward"),
    # Named "kill to start of line" by convention; wipes the whole line.
    Binding(KeyEvent.from_byte(ctrl("u")), "edit.kill_line"),
    Binding(KeyEvent.from_byte(ctrl("h")), "edit.delete_backward"),
    Binding(KeyEvent.from_byte(DEL), "edit.delete_backward"),
)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "INSERT_ACTION_ID"]
