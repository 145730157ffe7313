"""Textual host adapter for the line editor."""

from .controller import (
    TextualLineAdapter,
    TextualUIHooks,
    format_line,
    textual_key_to_events,
)

__all__ = ["TextualLineAdapter", "TextualUIHooks", "format_line", "textual_key_to_events"]
