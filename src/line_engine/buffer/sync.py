"""Adapter boundary types for syncing a line buffer with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gap import BufferView


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the line being edited.

    ``cursor`` counts bytes, the same unit the gap buffer moves in.
    ``before`` and ``after`` are the raw bytes on either side of it, so a
    cursor resting inside a multibyte character can still be placed.
    """

    text: str
    cursor: int
    before: bytes = b""
    after: bytes = b""
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_view(
        cls,
        view: BufferView,
        *,
        encoding: str = "utf-8",
        attributes: dict[str, str] | None = None,
    ) -> "BufferMirror":
        raw = view.text
        return cls(
            text=raw.decode(encoding, errors="replace"),
            cursor=view.cursor,
            before=raw[: view.cursor],
            after=raw[view.cursor :],
            attributes=dict(attributes or {}),
        )
