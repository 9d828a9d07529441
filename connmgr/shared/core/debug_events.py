"""Structured debug events for connmgr.

Events are cheap to emit and dropped unless recording has been enabled,
either by ``--debug``, ``CONNMGR_DEBUG=1`` or the ``debug_events_enabled``
setting. Recorded events are kept in a bounded in-memory buffer and, when a
log path is configured, appended to it as JSON lines.
"""

from __future__ import annotations

import json
import time
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

MAX_EVENTS = 500


@dataclass(frozen=True)
class DebugEvent:
    """A single recorded debug event."""

    name: str
    timestamp: float
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def category(self) -> str:
        return self.name.split(".", 1)[0]

    def to_json(self) -> str:
        payload = {"name": self.name, "ts": round(self.timestamp, 6), **self.data}
        return json.dumps(payload, default=str, sort_keys=True)


class DebugEventRecorder:
    """Bounded recorder with an optional JSON-lines file sink."""

    def __init__(self, max_events: int = MAX_EVENTS) -> None:
        self.enabled = False
        self.log_path: Path | None = None
        self._events: deque[DebugEvent] = deque(maxlen=max_events)

    def configure(self, *, enabled: bool, log_path: Path | None = None) -> None:
        self.enabled = enabled
        self.log_path = log_path

    def record(self, name: str, **data: Any) -> DebugEvent | None:
        if not self.enabled:
            return None
        event = DebugEvent(name=name, timestamp=time.time(), data=dict(data))
        self._events.append(event)
        if self.log_path is not None:
            try:
                self.log_path.parent.mkdir(parents=True, exist_ok=True)
                with self.log_path.open("a", encoding="utf-8") as handle:
                    handle.write(event.to_json() + "\n")
            except OSError:
                # Keep recording in memory when the log file is unwritable.
                self.log_path = None
        return event

    def events(self, category: str | None = None) -> list[DebugEvent]:
        if category is None:
            return list(self._events)
        return [event for event in self._events if event.category == category]

    def latest(self) -> DebugEvent | None:
        return self._events[-1] if self._events else None

    def clear(self) -> None:
        self._events.clear()


_recorder = DebugEventRecorder()


def get_debug_recorder() -> DebugEventRecorder:
    return _recorder


def configure_debug_events(*, enabled: bool, log_path: Path | None = None) -> None:
    """Enable or disable recording for the process."""
    _recorder.configure(enabled=enabled, log_path=log_path)


def emit_debug_event(name: str, **data: Any) -> DebugEvent | None:
    """Record a debug event if recording is enabled."""
    return _recorder.record(name, **data)


def format_debug_data(data: dict[str, Any]) -> str:
    """Format event data as ``key=value`` pairs for display."""
    parts = []
    for key in sorted(data):
        value = data[key]
        if isinstance(value, str):
            parts.append(f"{key}={value!r}")
        else:
            parts.append(f"{key}={value}")
    return " ".join(parts)
