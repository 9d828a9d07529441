"""Tests for debug event recording."""

from __future__ import annotations

import json
from pathlib import Path

from connmgr.shared.core.debug_events import (
    DebugEventRecorder,
    configure_debug_events,
    emit_debug_event,
    format_debug_data,
    get_debug_recorder,
)


def test_disabled_by_default():
    assert emit_debug_event("mode.changed", current="tree") is None
    assert get_debug_recorder().events() == []


def test_records_when_enabled(debug_events):
    event = emit_debug_event("mode.changed", previous="browsing", current="tree")

    assert event is not None
    assert event.category == "mode"
    assert debug_events.events("mode") == [event]
    assert debug_events.events("tree") == []


def test_appends_json_lines(tmp_path: Path):
    log_path = tmp_path / "logs" / "events.jsonl"
    configure_debug_events(enabled=True, log_path=log_path)

    emit_debug_event("tree.exit", module="ssh")
    emit_debug_event("tree.activate", module="ssh", node="ssh/0/0/0")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    payloads = [json.loads(line) for line in lines]
    assert [p["name"] for p in payloads] == ["tree.exit", "tree.activate"]
    assert payloads[1]["node"] == "ssh/0/0/0"


def test_unwritable_log_keeps_memory_buffer(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    recorder = DebugEventRecorder()
    recorder.configure(enabled=True, log_path=blocker / "events.jsonl")

    recorder.record("startup.config_missing")

    assert recorder.log_path is None
    assert [e.name for e in recorder.events()] == ["startup.config_missing"]


def test_buffer_is_bounded():
    recorder = DebugEventRecorder(max_events=3)
    recorder.configure(enabled=True)

    for index in range(5):
        recorder.record("dispatch.action", index=index)

    assert [e.data["index"] for e in recorder.events()] == [2, 3, 4]


def test_format_debug_data():
    assert format_debug_data({"module": "ssh", "count": 2}) == "count=2 module='ssh'"


def test_latest_event():
    recorder = DebugEventRecorder()
    assert recorder.latest() is None

    recorder.configure(enabled=True)
    recorder.record("modules.commit", module="ssh")
    recorder.record("tree.exit", module="ssh")

    assert recorder.latest().name == "tree.exit"
