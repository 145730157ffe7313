from __future__ import annotations

from contextlib import contextmanager

import pytest

from line_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple] = []
        self.context: dict[str, str] = {}

    def info_with(self, message, fields) -> None:
        self.records.append(("info", message, dict(fields)))

    def error_with(self, message, fields) -> None:
        self.records.append(("error", message, dict(fields)))

    def add_context(self, key, value) -> None:
        self.context[key] = value

    def remove_context(self, key) -> None:
        del self.context[key]

    @contextmanager
    def track_component(self, name):
        self.records.append(("component", name, {}))
        yield

    @contextmanager
    def profile(self, name):
        self.records.append(("profile", name, {}))
        yield


@pytest.fixture
def recording(monkeypatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setitem(telemetry._loggers, "tests.telemetry", logger)
    return logger


def test_record_event_attaches_fields(recording) -> None:
    telemetry.record_event(
        "buffer.grow", data={"to": 8, "raw": b"\x1b"}, logger_name="tests.telemetry"
    )

    level, message, fields = recording.records[-1]
    assert (level, message) == ("info", "event::buffer.grow")
    assert fields == {"event": "buffer.grow", "to": "8", "raw": "b'\\x1b'"}


def test_record_event_rejects_unknown_level(recording) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="chatty", logger_name="tests.telemetry")


def test_span_profiles_and_clears_context(recording) -> None:
    with telemetry.span(
        "editor::session",
        component="editor",
        metadata={"initial_capacity": 4},
        logger_name="tests.telemetry",
    ) as handle:
        assert recording.context == {"initial_capacity": "4"}
        handle.add_metadata("length", 3)

    assert recording.context == {}
    assert ("component", "editor", {}) in recording.records
    assert ("profile", "editor::session", {}) in recording.records
    assert handle.fields == {"initial_capacity": "4", "length": "3"}


def test_span_reports_failure_and_reraises(recording) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("editor::session", logger_name="tests.telemetry"):
            raise RuntimeError("boom")

    level, message, fields = recording.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert fields == {"span": "editor::session", "reason": "boom"}
    assert recording.context == {}
