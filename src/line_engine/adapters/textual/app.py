"""Executable Textual app that hosts the line editor."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use line_engine.adapters.textual.app"
    ) from exc

from line_engine.buffer import BufferMirror
from line_engine.config import EditorConfig
from line_engine.runtime import telemetry

from .controller import TextualLineAdapter, TextualUIHooks, format_line

CURSOR_MARK = "▏"


@dataclass
class UIState:
    line_text: str = ""
    status_text: str = ""
    history: list[str] = field(default_factory=list)


class LineEngineApp(App[None]):
    """Minimal Textual UI embedding the line editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#history {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#line-view {
		height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, prompt: str = "> ", config: EditorConfig | None = None) -> None:
        super().__init__()
        self._state = UIState()
        self._prompt = prompt
        self._config = config or EditorConfig.from_env()
        self.adapter: TextualLineAdapter | None = None
        self._history_widget: Static | None = None
        self._line_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("line_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="history-area"):
            self._history_widget = Static("", id="history", markup=False)
            yield self._history_widget
        self._line_widget = Static("", id="line-view", markup=False)
        yield self._line_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    async def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_line,
            submit=self._submit,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualLineAdapter(
            hooks, prompt=self._prompt, config=self._config
        )

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        if self.adapter.handle_textual_key(event.key, text=event.character):
            event.stop()

    def _update_line(self, mirror: BufferMirror) -> None:
        self._state.line_text = format_line(
            self._prompt, mirror, mark=CURSOR_MARK, encoding=self._config.encoding
        )
        if self._line_widget:
            self._line_widget.update(self._state.line_text)

    def _submit(self, line: str) -> None:
        self._state.history.append(line)
        if self._history_widget:
            self._history_widget.update("\n".join(self._state.history))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the line editor Textual demo.")
    parser.add_argument(
        "--prompt",
        default=os.environ.get("LINE_ENGINE_PROMPT", "> "),
        help="Prompt shown in front of the line (default: '> ')",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = LineEngineApp(prompt=args.prompt)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
