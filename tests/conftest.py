from __future__ import annotations

from collections import deque
from typing import Iterable, List, Union

import pytest

from line_engine.errors import TerminalRestoreError, TerminalSetupError
from line_engine.terminal import Terminal

Chunk = Union[bytes, BaseException]


class ScriptedTerminal(Terminal):
    """In-memory terminal returning one scripted chunk per read."""

    def __init__(
        self,
        chunks: Iterable[Chunk] = (),
        *,
        fail_setup: bool = False,
        fail_restore: bool = False,
    ) -> None:
        self.chunks = deque(chunks)
        self.output = bytearray()
        self.calls: List[str] = []
        self.read_sizes: List[int] = []
        self.fail_setup = fail_setup
        self.fail_restore = fail_restore

    def capture(self) -> None:
        self.calls.append("capture")
        if self.fail_setup:
            raise TerminalSetupError("scripted setup failure")

    def enter_raw(self) -> None:
        self.calls.append("enter_raw")

    def restore(self) -> None:
        self.calls.append("restore")
        if self.fail_restore:
            raise TerminalRestoreError("scripted restore failure")

    def read(self, size: int) -> bytes:
        self.read_sizes.append(size)
        if not self.chunks:
            return b""
        chunk = self.chunks.popleft()
        if isinstance(chunk, BaseException):
            raise chunk
        assert len(chunk) <= size, f"scripted chunk {chunk!r} exceeds read size {size}"
        return chunk

    def write(self, data: bytes) -> None:
        self.output += data


@pytest.fixture
def scripted():
    return ScriptedTerminal
