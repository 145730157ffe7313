"""Resolves decoded key events to editing actions."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from line_engine.keys import KeyEvent, KeyKind

from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, INSERT_ACTION_ID
from .models import ActionRef


class Keymap:
    """Read-only lookup table over the built-in actions and bindings.

    Bytes without a binding fall through to the insert action, control
    bytes included. ``NOKEY`` resolves to nothing.
    """

    def __init__(self) -> None:
        actions = {action.id: action for action in DEFAULT_ACTIONS}
        self._actions = MappingProxyType(actions)
        self._bindings = MappingProxyType(
            {binding.event: actions[binding.action_id] for binding in DEFAULT_BINDINGS}
        )

    @property
    def actions(self) -> Mapping[str, ActionRef]:
        return self._actions

    @property
    def bindings(self) -> Mapping[KeyEvent, ActionRef]:
        return self._bindings

    def resolve(self, event: KeyEvent) -> Optional[ActionRef]:
        if event.kind is KeyKind.NOKEY:
            return None
        action = self._bindings.get(event)
        if action is not None:
            return action
        if event.byte is not None:
            return self._actions[INSERT_ACTION_ID]
        return None


DEFAULT_KEYMAP = Keymap()

__all__ = ["DEFAULT_KEYMAP", "Keymap"]
