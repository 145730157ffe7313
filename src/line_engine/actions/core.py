"""Edit verbs applied to the gap buffer of a session."""

from __future__ import annotations

from line_engine.buffer import GapBuffer
from line_engine.keys import KeyEvent


def move_left(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.move_left()


def move_right(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.move_right()


def jump_to_start(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.jump_to_start()


def jump_to_end(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.jump_to_end()


def delete_forward(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.delete_forward()


def delete_backward(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.delete_backward()


def kill_line(buffer: GapBuffer, event: KeyEvent) -> None:
    del event
    buffer.kill_to_start()


def insert_byte(buffer: GapBuffer, event: KeyEvent) -> None:
    if event.byte is None:
        raise ValueError(f"Cannot insert a {event.kind.value} event")
    buffer.insert(event.byte)


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
