"""Prompt width accounting and the in-place redraw byte sequences."""

from __future__ import annotations

from line_engine.buffer import BufferView
from line_engine.config import INVISIBLE_END, INVISIBLE_START

CSI = b"\x1b["
CARRIAGE_RETURN = b"\r"
ERASE_TO_END = CSI + b"K"
FINISH = b"\r\n"


def cursor_forward(columns: int) -> bytes:
    return CSI + str(columns).encode("ascii") + b"C"


def cursor_back(columns: int) -> bytes:
    return CSI + str(columns).encode("ascii") + b"D"


def visible_width(
    prompt: bytes,
    *,
    invisible_start: int = INVISIBLE_START,
    invisible_end: int = INVISIBLE_END,
) -> int:
    """Count prompt bytes that occupy a column.

    Bytes between ``invisible_start`` and ``invisible_end`` are skipped, and
    the markers themselves never count.
    """

    width = 0
    counting = True
    for byte in prompt:
        if byte == invisible_start:
            counting = False
        elif byte == invisible_end:
            counting = True
        elif counting:
            width += 1
    return width


def redraw(prompt_width: int, view: BufferView) -> bytes:
    """Bytes that repaint the line after the prompt and place the cursor.

    ``CSI 0 C`` still moves one column on most terminals, so the forward
    move is left out for an empty prompt.
    """

    parts = [CARRIAGE_RETURN]
    if prompt_width > 0:
        parts.append(cursor_forward(prompt_width))
    parts.append(ERASE_TO_END)
    parts.append(view.pre)
    parts.append(view.post)
    back = view.cursor_back
    if back > 0:
        parts.append(cursor_back(back))
    return b"".join(parts)


__all__ = [
    "CSI",
    "CARRIAGE_RETURN",
    "ERASE_TO_END",
    "FINISH",
    "cursor_forward",
    "cursor_back",
    "visible_width",
    "redraw",
]
