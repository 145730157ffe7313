"""Gap buffer storage for a single editable line.

The line lives in one ``bytearray`` split into a pre-cursor region
``[0, gap_end)`` and a post-cursor region ``[post_start, capacity)``. The
bytes in between are the gap and hold nothing meaningful.

Cursor motion never copies: it only adjusts ``pending_offset``. The copy
happens once, in :meth:`GapBuffer.commit_pending_move`, right before an edit
needs the gap to sit at the logical cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from line_engine.errors import BufferAllocationError, BufferReleasedError
from line_engine.runtime import telemetry


@dataclass(frozen=True, slots=True)
class BufferView:
    """Read-only snapshot of the two regions and the uncommitted motion."""

    pre: bytes
    post: bytes
    pending_offset: int = 0

    @property
    def text(self) -> bytes:
        return self.pre + self.post

    @property
    def cursor(self) -> int:
        return len(self.pre) + self.pending_offset

    @property
    def cursor_back(self) -> int:
        """Columns to step left after drawing ``pre + post``."""

        return len(self.post) - self.pending_offset


class GapBuffer:
    """Byte-oriented gap buffer with deferred cursor motion."""

    start = 0

    def __init__(
        self, initial_capacity: int, *, max_capacity: Optional[int] = None
    ) -> None:
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        self.max_capacity = max_capacity
        self._data: Optional[bytearray] = self._allocate(initial_capacity)
        self._gap_end = 0
        self._post_start = initial_capacity
        self.pending_offset = 0

    @staticmethod
    def _allocate(size: int) -> bytearray:
        try:
            return bytearray(size)
        except MemoryError as exc:
            raise BufferAllocationError(
                f"Unable to allocate {size} bytes", requested=size
            ) from exc

    @property
    def data(self) -> bytearray:
        if self._data is None:
            raise BufferReleasedError("Gap buffer storage has been released")
        return self._data

    @property
    def gap_end(self) -> int:
        return self._gap_end

    @property
    def post_start(self) -> int:
        return self._post_start

    @property
    def capacity(self) -> int:
        return len(self.data)

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def cursor(self) -> int:
        """Logical edit position: the gap boundary plus pending motion."""

        return self._gap_end + self.pending_offset

    def __len__(self) -> int:
        return self._gap_end + (self.capacity - self._post_start)

    @property
    def pre_region(self) -> bytes:
        return bytes(self.data[: self._gap_end])

    @property
    def post_region(self) -> bytes:
        return bytes(self.data[self._post_start :])

    def view(self) -> BufferView:
        return BufferView(
            pre=self.pre_region,
            post=self.post_region,
            pending_offset=self.pending_offset,
        )

    # -- cursor motion -------------------------------------------------

    def move_right(self) -> None:
        if self._post_start + self.pending_offset < self.capacity:
            self.pending_offset += 1

    def move_left(self) -> None:
        if self._gap_end + self.pending_offset > self.start:
            self.pending_offset -= 1

    def jump_to_start(self) -> None:
        self.pending_offset = self.start - self._gap_end

    def jump_to_end(self) -> None:
        self.pending_offset = self.capacity - self._post_start

    def commit_pending_move(self) -> None:
        """Slide the gap so it sits at the logical cursor."""

        offset = self.pending_offset
        if offset == 0:
            return

        data = self.data
        if offset < 0:
            self._gap_end += offset
            self._post_start += offset
            count = -offset
            data[self._post_start : self._post_start + count] = data[
                self._gap_end : self._gap_end + count
            ]
        else:
            data[self._gap_end : self._gap_end + offset] = data[
                self._post_start : self._post_start + offset
            ]
            self._gap_end += offset
            self._post_start += offset

        self.pending_offset = 0

    # -- edits ---------------------------------------------------------

    def insert(self, byte: int) -> None:
        """Write ``byte`` at the logical cursor, doubling capacity when full."""

        self.commit_pending_move()
        if self._gap_end == self._post_start:
            self._grow()
        self.data[self._gap_end] = byte
        self._gap_end += 1

    def _grow(self) -> None:
        old_capacity = self.capacity
        new_capacity = old_capacity * 2
        if self.max_capacity is not None and new_capacity > self.max_capacity:
            telemetry.record_event(
                "buffer.allocation_failed",
                level="error",
                data={"capacity": old_capacity, "requested": new_capacity},
            )
            raise BufferAllocationError(
                f"Buffer growth to {new_capacity} bytes exceeds limit "
                f"{self.max_capacity}",
                requested=new_capacity,
            )
        try:
            # Widening the gap in place keeps both regions at their offsets
            # from the base and from the end respectively.
            self.data[self._gap_end : self._gap_end] = bytes(
                new_capacity - old_capacity
            )
        except MemoryError as exc:
            telemetry.record_event(
                "buffer.allocation_failed",
                level="error",
                data={"capacity": old_capacity, "requested": new_capacity},
            )
            raise BufferAllocationError(
                f"Unable to grow buffer to {new_capacity} bytes",
                requested=new_capacity,
            ) from exc
        self._post_start += new_capacity - old_capacity
        telemetry.record_event(
            "buffer.grow",
            level="debug",
            data={"from": old_capacity, "to": new_capacity},
        )

    def delete_forward(self) -> None:
        self.commit_pending_move()
        if self._post_start < self.capacity:
            self._post_start += 1

    def delete_backward(self) -> None:
        self.commit_pending_move()
        if self._gap_end > self.start:
            self._gap_end -= 1

    def kill_to_start(self) -> None:
        """Discard the whole line.

        Bound to the "kill to start of line" command, but both regions are
        emptied, not only the text before the cursor.
        """

        self._gap_end = self.start
        self._post_start = self.capacity
        self.pending_offset = 0

    def extract_text(self) -> bytes:
        return self.pre_region + self.post_region

    def release(self) -> None:
        self._data = None
        self._gap_end = 0
        self._post_start = 0
        self.pending_offset = 0

    def __repr__(self) -> str:
        if self._data is None:
            return "GapBuffer(released)"
        return (
            f"GapBuffer(text={self.extract_text()!r}, cursor={self.cursor}, "
            f"gap={self._post_start - self._gap_end}, capacity={self.capacity})"
        )


__all__ = ["BufferView", "GapBuffer"]
