"""Line editing session: read, decode, apply, redraw until Enter."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from line_engine.buffer import BufferMirror, BufferView, GapBuffer
from line_engine.config import EditorConfig
from line_engine.errors import TerminalRestoreError
from line_engine.keymaps import DEFAULT_KEYMAP
from line_engine.keys import KeyEvent, KeyReader
from line_engine.keys.models import NEWLINE
from line_engine.runtime import telemetry
from line_engine.terminal import PosixTerminal, TerminalIO

from .render import FINISH, redraw, visible_width

Prompt = Union[str, bytes]


class EditorState(str, Enum):
    EDITING = "editing"
    DONE = "done"
    ABORTED = "aborted"


def _encode(prompt: Prompt, encoding: str) -> bytes:
    if isinstance(prompt, bytes):
        return prompt
    return prompt.encode(encoding, errors="surrogateescape")


class LineEditor:
    """Owns one gap buffer for the length of a single session.

    The editor can be driven two ways: :meth:`run` pulls keys from a
    terminal until Enter, while hosts that receive key events of their own
    call :meth:`feed` and :meth:`render` directly.
    """

    def __init__(
        self,
        prompt: Prompt = b"",
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.prompt = _encode(prompt, self.config.encoding)
        self.prompt_width = visible_width(
            self.prompt,
            invisible_start=self.config.invisible_start,
            invisible_end=self.config.invisible_end,
        )
        self.keymap = DEFAULT_KEYMAP
        self.buffer = GapBuffer(
            self.config.initial_capacity, max_capacity=self.config.max_capacity
        )
        self.state = EditorState.EDITING
        self._result: Optional[bytes] = None

    @property
    def editing(self) -> bool:
        return self.state is EditorState.EDITING

    def feed(self, event: KeyEvent) -> bool:
        """Apply one key event; return ``False`` once the line is finished."""

        if not self.editing:
            raise RuntimeError(f"Session is {self.state.value}, cannot accept keys")

        if event.byte == NEWLINE:
            self._finish()
            return False

        action = self.keymap.resolve(event)
        if action is None:
            return True
        try:
            action(self.buffer, event)
        except Exception:
            self.abort()
            raise
        return True

    def render(self) -> bytes:
        return redraw(self.prompt_width, self.buffer.view())

    def view(self) -> BufferView:
        return self.buffer.view()

    def mirror(self) -> BufferMirror:
        return BufferMirror.from_view(
            self.buffer.view(),
            encoding=self.config.encoding,
            attributes={"state": self.state.value},
        )

    def result(self) -> bytes:
        if self._result is None:
            raise RuntimeError(f"Session is {self.state.value}, no line available")
        return self._result

    def abort(self) -> None:
        if not self.buffer.released:
            self.buffer.release()
        self.state = EditorState.ABORTED

    def _finish(self) -> None:
        self._result = self.buffer.extract_text()
        self.buffer.release()
        self.state = EditorState.DONE

    def run(self, terminal: TerminalIO) -> bytes:
        """Drive the session from ``terminal`` until Enter."""

        reader = KeyReader(terminal)
        try:
            terminal.write(self.prompt)
            while True:
                event = reader.read_key()
                if not self.feed(event):
                    terminal.write(FINISH)
                    break
                terminal.write(self.render())
        except BaseException:
            if self.editing:
                self.abort()
            raise
        return self.result()


def read_line_bytes(
    prompt: Prompt = b"",
    *,
    terminal: Optional[TerminalIO] = None,
    config: Optional[EditorConfig] = None,
) -> bytes:
    """Read one line from ``terminal`` (stdin/stdout by default) as bytes.

    Raises :class:`~line_engine.errors.TerminalSetupError` when raw mode
    cannot be entered and :class:`~line_engine.errors.BufferAllocationError`
    when the buffer cannot grow; no partial line is returned in either case.
    A failed restore is logged and, with ``config.strict_restore``, raised.
    """

    config = config or EditorConfig.from_env()
    terminal = terminal or PosixTerminal()

    with telemetry.span(
        "editor::session",
        component="editor",
        metadata={"initial_capacity": config.initial_capacity},
    ) as handle:
        telemetry.record_event("session.start", level="debug")
        try:
            with terminal.raw_mode():
                line = LineEditor(prompt, config=config).run(terminal)
        except TerminalRestoreError:
            # Only raised after a finished line; already logged by raw_mode.
            if config.strict_restore:
                raise
        handle.add_metadata("length", len(line))
        telemetry.record_event("session.done", level="debug", data={"length": len(line)})
        return line


def read_line(
    prompt: Prompt = "",
    *,
    terminal: Optional[TerminalIO] = None,
    config: Optional[EditorConfig] = None,
) -> str:
    """Read one line and decode it with ``config.encoding``.

    Bytes that do not decode are kept as surrogate escapes, so
    ``line.encode(encoding, "surrogateescape")`` gives back exactly what was
    typed.
    """

    config = config or EditorConfig.from_env()
    line = read_line_bytes(prompt, terminal=terminal, config=config)
    return line.decode(config.encoding, errors="surrogateescape")


__all__ = [
    "EditorState",
    "LineEditor",
    "read_line",
    "read_line_bytes",
]
