"""Dataclasses describing key bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from line_engine.buffer import GapBuffer
from line_engine.keys import KeyEvent

ActionHandler = Callable[[GapBuffer, KeyEvent], None]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: ActionHandler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, buffer: GapBuffer, event: KeyEvent) -> None:
        self.handler(buffer, event)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key event with an action id."""

    event: KeyEvent
    action_id: str

    def __post_init__(self) -> None:
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.event.token


__all__ = ["ActionHandler", "ActionRef", "Binding"]
