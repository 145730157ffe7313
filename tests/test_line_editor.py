from __future__ import annotations

import pytest

from line_engine.config import EditorConfig
from line_engine.editor import EditorState, LineEditor, read_line, read_line_bytes
from line_engine.errors import (
    BufferAllocationError,
    TerminalRestoreError,
    TerminalSetupError,
)
from line_engine.keymaps import DEFAULT_KEYMAP
from line_engine.keys import KeyEvent, NO_KEY, ctrl
from line_engine.keys.models import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

LEFT = b"\x1b[D"
RIGHT = b"\x1b[C"
UP = b"\x1b[A"
DOWN = b"\x1b[B"
ENTER = b"\n"


def keys(*chunks: bytes) -> list[bytes]:
    """Split plain text into one-byte reads; escape sequences stay whole."""

    result: list[bytes] = []
    for chunk in chunks:
        if chunk.startswith(b"\x1b"):
            result.append(chunk)
        else:
            result.extend(bytes([byte]) for byte in chunk)
    return result


def type_text(editor: LineEditor, text: bytes) -> None:
    for byte in text:
        assert editor.feed(KeyEvent.from_byte(byte))


def run_session(scripted, *chunks: bytes, prompt: str = "> ", **config) -> bytes:
    terminal = scripted(keys(*chunks))
    return read_line_bytes(prompt, terminal=terminal, config=EditorConfig(**config))


def test_insert_after_left_arrow(scripted) -> None:
    terminal = scripted(keys(b"hi", LEFT, b"X", ENTER))

    line = read_line("> ", terminal=terminal, config=EditorConfig())

    assert line == "hXi"
    assert terminal.calls == ["capture", "enter_raw", "restore"]


def test_session_output_follows_redraw_protocol(scripted) -> None:
    terminal = scripted(keys(b"hi", LEFT, b"X", ENTER))

    read_line_bytes(b"> ", terminal=terminal, config=EditorConfig())

    assert bytes(terminal.output) == (
        b"> "
        b"\r\x1b[2C\x1b[Kh"
        b"\r\x1b[2C\x1b[Khi"
        b"\r\x1b[2C\x1b[Khi\x1b[1D"
        b"\r\x1b[2C\x1b[KhXi\x1b[1D"
        b"\r\n"
    )


def test_enter_alone_returns_empty_line(scripted) -> None:
    terminal = scripted([ENTER])

    assert read_line("> ", terminal=terminal, config=EditorConfig()) == ""
    assert bytes(terminal.output) == b"> \r\n"


def test_kill_command_wipes_line(scripted) -> None:
    line = run_session(scripted, b"hello", LEFT, LEFT, bytes([ctrl("u")]), ENTER)

    assert line == b""


def test_control_letter_motion(scripted) -> None:
    line = run_session(
        scripted,
        b"bc",
        bytes([ctrl("a")]),
        b"a",
        bytes([ctrl("e")]),
        b"d",
        bytes([ctrl("b")]),
        bytes([ctrl("b")]),
        bytes([ctrl("f")]),
        b"_",
        ENTER,
    )

    assert line == b"abc_d"


def test_arrow_jumps(scripted) -> None:
    line = run_session(scripted, b"mid", UP, b"<", DOWN, b">", ENTER)

    assert line == b"<mid>"


def test_deletions(scripted) -> None:
    line = run_session(
        scripted,
        b"abcdef",
        LEFT,
        LEFT,
        bytes([ctrl("d")]),
        bytes([ctrl("h")]),
        b"\x7f",
        RIGHT,
        ENTER,
    )

    assert line == b"abf"


def test_unbound_control_byte_is_inserted(scripted) -> None:
    line = run_session(scripted, b"a", bytes([ctrl("k")]), b"b", ENTER)

    assert line == b"a\x0bb"


def test_key_table_cannot_be_replaced(scripted) -> None:
    assert LineEditor().keymap is DEFAULT_KEYMAP
    with pytest.raises(TypeError):
        LineEditor(keymap=DEFAULT_KEYMAP)  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        read_line_bytes(b"", terminal=scripted([ENTER]), keymap=DEFAULT_KEYMAP)  # type: ignore[call-arg]


def test_unknown_escape_sequence_is_ignored(scripted) -> None:
    terminal = scripted(keys(b"a", b"\x1b[Z", ENTER))

    line = read_line_bytes(b"", terminal=terminal, config=EditorConfig())

    assert line == b"a"
    assert bytes(terminal.output) == b"\r\x1b[Ka\r\x1b[Ka\r\n"


def test_pasted_bytes_in_one_read(scripted) -> None:
    terminal = scripted([b"abc", ENTER])

    assert read_line_bytes(b"", terminal=terminal, config=EditorConfig()) == b"abc"


def test_read_line_decodes_multibyte_text(scripted) -> None:
    terminal = scripted([b"\xc3", b"\xa9", ENTER])

    assert read_line("", terminal=terminal, config=EditorConfig()) == "é"


def test_read_line_keeps_undecodable_bytes(scripted) -> None:
    terminal = scripted([b"\xff", ENTER])

    line = read_line("", terminal=terminal, config=EditorConfig())

    assert line.encode("utf-8", errors="surrogateescape") == b"\xff"


def test_growth_during_session(scripted) -> None:
    text = b"the quick brown fox"

    line = run_session(scripted, text, LEFT, b"!", ENTER, initial_capacity=4)

    assert line == b"the quick brown fo!x"


def test_allocation_failure_aborts_session(scripted) -> None:
    terminal = scripted(keys(b"abc", ENTER))
    config = EditorConfig(initial_capacity=2, max_capacity=2)

    with pytest.raises(BufferAllocationError):
        read_line_bytes(b"", terminal=terminal, config=config)

    assert terminal.calls[-1] == "restore"
    assert not bytes(terminal.output).endswith(b"\r\n")


def test_setup_failure_leaves_terminal_untouched(scripted) -> None:
    terminal = scripted([ENTER], fail_setup=True)

    with pytest.raises(TerminalSetupError):
        read_line_bytes(b"> ", terminal=terminal, config=EditorConfig())

    assert terminal.calls == ["capture"]
    assert bytes(terminal.output) == b""


def test_restore_failure_is_logged_by_default(scripted) -> None:
    terminal = scripted(keys(b"ok", ENTER), fail_restore=True)

    line = read_line_bytes(b"", terminal=terminal, config=EditorConfig())

    assert line == b"ok"


def test_restore_failure_raises_in_strict_mode(scripted) -> None:
    terminal = scripted(keys(b"ok", ENTER), fail_restore=True)

    with pytest.raises(TerminalRestoreError):
        read_line_bytes(
            b"", terminal=terminal, config=EditorConfig(strict_restore=True)
        )


def test_session_error_wins_over_restore_failure(scripted) -> None:
    terminal = scripted(keys(b"abc", ENTER), fail_restore=True)
    config = EditorConfig(initial_capacity=2, max_capacity=2, strict_restore=True)

    with pytest.raises(BufferAllocationError):
        read_line_bytes(b"", terminal=terminal, config=config)

    assert terminal.calls == ["capture", "enter_raw", "restore"]


def test_interrupt_inside_raw_mode_restores_terminal(scripted) -> None:
    terminal = scripted([b"a", KeyboardInterrupt()])

    with pytest.raises(KeyboardInterrupt):
        read_line_bytes(b"", terminal=terminal, config=EditorConfig())

    assert terminal.calls == ["capture", "enter_raw", "restore"]


def test_end_of_input_restores_terminal(scripted) -> None:
    terminal = scripted([b"a"])

    with pytest.raises(EOFError):
        read_line_bytes(b"", terminal=terminal, config=EditorConfig())

    assert terminal.calls == ["capture", "enter_raw", "restore"]


def test_feed_reports_completion() -> None:
    editor = LineEditor("> ")
    type_text(editor, b"hi")

    assert editor.feed(KeyEvent.from_byte(ord("\n"))) is False
    assert editor.state is EditorState.DONE
    assert editor.result() == b"hi"
    assert editor.buffer.released


def test_feed_after_done_is_rejected() -> None:
    editor = LineEditor()
    editor.feed(KeyEvent.from_byte(ord("\n")))

    with pytest.raises(RuntimeError):
        editor.feed(KeyEvent.from_byte(ord("a")))


def test_result_before_enter_is_rejected() -> None:
    editor = LineEditor()
    type_text(editor, b"a")

    with pytest.raises(RuntimeError):
        editor.result()


def test_no_key_changes_nothing() -> None:
    editor = LineEditor()
    type_text(editor, b"ab")

    assert editor.feed(NO_KEY) is True
    assert editor.view().text == b"ab"
    assert editor.view().cursor == 2


def test_arrow_events_move_logical_cursor() -> None:
    editor = LineEditor()
    type_text(editor, b"abc")

    editor.feed(KEY_LEFT)
    editor.feed(KEY_LEFT)
    assert editor.view().cursor == 1
    editor.feed(KEY_RIGHT)
    assert editor.view().cursor == 2
    editor.feed(KEY_UP)
    assert editor.view().cursor == 0
    editor.feed(KEY_DOWN)
    assert editor.view().cursor == 3


def test_allocation_failure_from_feed_aborts_editor() -> None:
    editor = LineEditor(config=EditorConfig(initial_capacity=1, max_capacity=1))
    type_text(editor, b"a")

    with pytest.raises(BufferAllocationError):
        editor.feed(KeyEvent.from_byte(ord("b")))

    assert editor.state is EditorState.ABORTED
    assert editor.buffer.released


def test_prompt_width_ignores_invisible_markup() -> None:
    editor = LineEditor("\x01\x1b[1m\x02$ \x01\x1b[0m\x02")

    assert editor.prompt_width == 2
    assert editor.render() == b"\r\x1b[2C\x1b[K"


def test_mirror_reports_text_and_cursor() -> None:
    editor = LineEditor()
    type_text(editor, b"abc")
    editor.feed(KEY_LEFT)

    mirror = editor.mirror()

    assert mirror.text == "abc"
    assert mirror.cursor == 2
    assert mirror.attributes == {"state": "editing"}
