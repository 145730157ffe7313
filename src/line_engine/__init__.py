"""Gap-buffer based single line editor for raw terminals."""

from .config import EditorConfig
from .editor import LineEditor, read_line, read_line_bytes
from .errors import (
    BufferAllocationError,
    LineEngineError,
    TerminalRestoreError,
    TerminalSetupError,
)

__all__ = [
    "EditorConfig",
    "LineEditor",
    "read_line",
    "read_line_bytes",
    "LineEngineError",
    "BufferAllocationError",
    "TerminalSetupError",
    "TerminalRestoreError",
    "adapters",
    "actions",
    "buffer",
    "editor",
    "keymaps",
    "keys",
    "runtime",
    "terminal",
]

__version__ = "0.1.0"
