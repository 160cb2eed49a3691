"""conftest.py - Shared fixtures for slotlog tests."""

from typing import List, Tuple

import pytest

from slotlog import binding
from slotlog.sink import LogSink


class RecordingSink(LogSink):
    """Stores every ``(slot, text)`` delivery in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, str]] = []
        self.stale: List[int] = []
        self.setup_log_sink()

    def on_log(self, slot: int, text: str) -> None:
        self.calls.append((slot, text))

    def on_line_stale(self, slot: int) -> None:
        self.stale.append(slot)


@pytest.fixture(autouse=True)
def _unbound(monkeypatch):
    """Start every test with no process-wide sink bound."""
    monkeypatch.setattr(binding, "_active_sink", None)


@pytest.fixture
def sink() -> RecordingSink:
    """A RecordingSink already bound process-wide."""
    rec = RecordingSink()
    binding.bind_log_sink(rec)
    return rec


def pending(sink: LogSink, slot: int) -> str:
    """Text still buffered in ``slot`` (test-only peek at the slot table)."""
    return sink._streams[slot].getvalue()
