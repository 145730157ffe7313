"""Adapter that feeds Textual key events into a LineEditor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from line_engine.buffer import BufferMirror
from line_engine.config import EditorConfig
from line_engine.editor import LineEditor
from line_engine.errors import LineEngineError
from line_engine.keys import KeyEvent
from line_engine.keys.models import (
    DEL,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    NEWLINE,
    ctrl,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


NAMED_KEYS: Dict[str, KeyEvent] = {
    "left": KEY_LEFT,
    "right": KEY_RIGHT,
    "up": KEY_UP,
    "down": KEY_DOWN,
    "home": KeyEvent.from_byte(ctrl("a")),
    "end": KeyEvent.from_byte(ctrl("e")),
    "backspace": KeyEvent.from_byte(DEL),
    "delete": KeyEvent.from_byte(ctrl("d")),
    "enter": KeyEvent.from_byte(NEWLINE),
    "tab": KeyEvent.from_byte(ord("\t")),
}


def textual_key_to_events(
    key: str, text: Optional[str] = None, *, encoding: str = "utf-8"
) -> tuple[KeyEvent, ...]:
    """Translate a Textual key name (plus its character) into byte events.

    A character that encodes to several bytes becomes several events, the
    same bytes a raw terminal would have delivered.
    """

    named = NAMED_KEYS.get(key)
    if named is not None:
        return (named,)
    if key.startswith("ctrl+"):
        letter = key[len("ctrl+") :]
        if len(letter) == 1 and "a" <= letter <= "z":
            return (KeyEvent.from_byte(ctrl(letter)),)
        return ()
    if text:
        return tuple(KeyEvent.from_byte(byte) for byte in text.encode(encoding))
    return ()


def format_line(
    prompt: str, mirror: BufferMirror, *, mark: str, encoding: str = "utf-8"
) -> str:
    """Render ``prompt`` and the line with ``mark`` at the byte cursor."""

    before = mirror.before.decode(encoding, errors="replace")
    after = mirror.after.decode(encoding, errors="replace")
    return f"{prompt}{before}{mark}{after}"


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    submit: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualLineAdapter:
    """Runs consecutive editing sessions fed by host key events."""

    def __init__(
        self,
        hooks: TextualUIHooks,
        *,
        prompt: str = "",
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.hooks = hooks
        self.prompt = prompt
        self.config = config or EditorConfig()
        self.editor = self._new_editor()
        self._refresh_buffer()

    def _new_editor(self) -> LineEditor:
        return LineEditor(self.prompt, config=self.config)

    def handle_textual_key(self, key: str, *, text: Optional[str] = None) -> bool:
        """Dispatch one Textual key; return whether it meant anything."""

        events = textual_key_to_events(key, text, encoding=self.config.encoding)
        self._log_state("key ->", key=key, text=text, events=len(events))
        if not events:
            return False

        for event in events:
            try:
                editing = self.editor.feed(event)
            except LineEngineError as exc:
                # The failed session is already aborted; start a fresh line.
                self._log_state("error ->", error=str(exc))
                self.hooks.update_status(f"error: {exc}")
                self.editor = self._new_editor()
                self._refresh_buffer()
                return True
            if not editing:
                self._submit()
        self._refresh_buffer()
        return True

    def _submit(self) -> None:
        line = self.editor.result().decode(self.config.encoding, errors="replace")
        self._log_state("submit ->", line=line)
        self.hooks.submit(line)
        self.hooks.update_status("submitted")
        self.editor = self._new_editor()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.editor.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "state": self.editor.state.value,
            "cursor": self.editor.buffer.cursor,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextualLineAdapter",
    "TextualUIHooks",
    "format_line",
    "textual_key_to_events",
]
