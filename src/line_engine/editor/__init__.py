"""Line editing sessions and the redraw protocol."""

from .line_editor import EditorState, LineEditor, read_line, read_line_bytes
from .render import redraw, visible_width

__all__ = [
    "EditorState",
    "LineEditor",
    "read_line",
    "read_line_bytes",
    "redraw",
    "visible_width",
]
