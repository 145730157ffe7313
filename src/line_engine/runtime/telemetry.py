"""telelog wiring for the line editor.

Only three things are exported: :func:`get_logger`, :func:`record_event` and
the :func:`span` context manager. Settings come from ``LINE_ENGINE_*``
environment variables and are read once, the first time a logger is needed.

While a line is being read the editor owns the terminal, so logs never go to
the console unless ``LINE_ENGINE_LOG_CONSOLE`` asks for it (uncoloured with
``LINE_ENGINE_NO_COLOR``). Point ``LINE_ENGINE_LOG_FILE`` at a file to keep
them; ``LINE_ENGINE_LOG_JSON`` switches the format and
``LINE_ENGINE_LOG_LEVEL`` the threshold (``WARNING`` by default).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ROOT_LOGGER = "line_engine"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.environ.get(f"LINE_ENGINE_{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return repr(bytes(value))
    return value if isinstance(value, str) else repr(value)


def _load_config() -> Any:
    config = tl.Config()
    config.with_min_level((_setting("LOG_LEVEL") or "WARNING").upper())
    console = _enabled("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _enabled("NO_COLOR"))
    if _enabled("LOG_JSON"):
        config.with_json_format(True)
    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def get_logger(name: Optional[str] = None) -> Any:
    """Return the telelog logger for ``name`` (the package logger by default)."""

    global _config
    key = name or ROOT_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        if _config is None:
            _config = _load_config()
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _emit(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(key, _text(value)) for key, value in fields.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value fields."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; collects fields reported if the block fails."""

    logger: Any
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.fields[key] = _text(value)

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", {"span": self.name, **self.fields, "reason": reason})


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``, optionally tracked as ``component``.

    ``metadata`` is attached as logger context for the duration of the block.
    An exception leaving the block is logged through :meth:`SpanHandle.fail`
    and re-raised.
    """

    logger = get_logger(logger_name)
    handle = SpanHandle(logger=logger, name=name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            logger.add_context(key, value)
            handle.add_metadata(key, value)
        stack.callback(lambda: [logger.remove_context(key) for key in context])
        if component:
            stack.enter_context(logger.track_component(component))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = ["SpanHandle", "get_logger", "record_event", "span"]
