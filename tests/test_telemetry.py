from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Any, Iterator

import pytest

from editer import AdapterRegistry, AdapterSpec, Slot, edit, try_edit
from editer.runtime import reset_settings, telemetry
from editer.sequence import ListAdapter


class RecordingLogger:
    """Stand-in for a telelog logger that keeps everything it is told."""

    def __init__(self) -> None:
        self.context: dict[str, str] = {}
        self.records: list[tuple[str, str, dict[str, str], dict[str, str]]] = []
        self.profiles: list[str] = []
        self.components: list[str] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiles.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    def _record(self, level: str, message: str, pairs: Any) -> None:
        self.records.append((level, message, dict(pairs), dict(self.context)))

    def debug_with(self, message: str, pairs: Any) -> None:
        self._record("debug", message, pairs)

    def info_with(self, message: str, pairs: Any) -> None:
        self._record("info", message, pairs)

    def warning_with(self, message: str, pairs: Any) -> None:
        self._record("warning", message, pairs)

    def error_with(self, message: str, pairs: Any) -> None:
        self._record("error", message, pairs)

    def finished(self, span_name: str) -> list[tuple[dict[str, str], dict[str, str]]]:
        return [
            (payload, context)
            for _, message, payload, context in self.records
            if message == "span::finish" and payload.get("span") == span_name
        ]


@pytest.fixture
def logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[RecordingLogger]:
    recording = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: recording)
    monkeypatch.setattr(telemetry, "_ACTIVE_CONTEXT", {})
    reset_settings()
    yield recording
    reset_settings()


def test_edit_span_finishes_with_steps_and_length(logger: RecordingLogger) -> None:
    edit([1, 2, 3], lambda slot: slot.remove() if slot == 2 else None)

    [(payload, context)] = logger.finished("engine::edit")
    assert payload["steps"] == "3"
    assert payload["length"] == "2"
    assert payload["sequence"] == "list"
    assert payload["component"] == "engine"
    assert context == {"sequence": "list"}
    assert "engine::edit" in logger.profiles
    assert logger.context == {}


def test_try_edit_span_finishes_only_when_completed(logger: RecordingLogger) -> None:
    try_edit([1, 2], lambda slot: slot.insert_after([0]) if slot == 2 else None)

    [(payload, _)] = logger.finished("engine::try_edit")
    assert payload["steps"] == "3"
    assert payload["length"] == "3"

    try_edit([1, 2], lambda slot: "stop")

    assert len(logger.finished("engine::try_edit")) == 1
    assert [message for _, message, _, _ in logger.records][-1] == "event::edit::aborted"


def test_failing_editor_records_span_failure(logger: RecordingLogger) -> None:
    def editor(slot: Slot[int]) -> None:
        raise ValueError("bad element")

    with pytest.raises(ValueError):
        edit([1], editor)

    failures = [payload for level, message, payload, _ in logger.records if message == "span::fail"]
    assert failures[-1]["reason"] == "ValueError: bad element"
    assert logger.context == {}


def test_nested_edit_restores_the_outer_span_context(logger: RecordingLogger) -> None:
    inner = deque([7, 8])

    def editor(slot: Slot[int]) -> None:
        if slot == 1:
            edit(inner, lambda nested: nested.remove() if nested == 7 else None)

    edit([1, 2], editor)

    assert inner == deque([8])
    [(inner_payload, inner_context)] = logger.finished("engine::edit")[:1]
    assert inner_payload["sequence"] == "deque"
    assert inner_context == {"sequence": "deque"}
    [(_, outer_context)] = logger.finished("engine::edit")[1:]
    assert outer_context == {"sequence": "list"}
    assert logger.context == {}


def test_registry_changes_run_inside_registry_spans(logger: RecordingLogger) -> None:
    registry = AdapterRegistry()

    registry.register(AdapterSpec(name="list", kind=list, factory=ListAdapter))
    registry.unregister("list")

    assert logger.profiles == ["registry::register", "registry::unregister"]
    assert logger.components == ["registry", "registry"]
    assert logger.context == {}
