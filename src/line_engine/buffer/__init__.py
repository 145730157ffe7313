"""Gap buffer storage and host snapshots."""

from .gap import BufferView, GapBuffer
from .sync import BufferMirror

__all__ = [
    "BufferView",
    "GapBuffer",
    "BufferMirror",
]
