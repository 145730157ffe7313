"""Terminal collaborators used by the line editor."""

from .base import Terminal, TerminalIO
from .posix import PosixTerminal

__all__ = ["Terminal", "TerminalIO", "PosixTerminal"]
