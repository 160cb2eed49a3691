"""slotlog/__init__.py - Public API for the slotlog package.

slotlog lets application code address a fixed set of numbered log lines and
stream values into them. Each completed expression is delivered as one line of
text to a sink, replacing whatever that line showed before, as in a classic
runtime debug overlay.

Quick start:
    from slotlog import OverlaySink, bind_log_sink, make_log_line

    # 1. Once, at startup: build a sink and bind it process-wide
    overlay = OverlaySink()
    bind_log_sink(overlay)

    # 2. At each call site: keep a LogLine for a fixed slot
    pos_line = make_log_line(3)

    # 3. Stream into it; the text is delivered when the block completes
    with pos_line() as out:
        out << "x=" << 42
    overlay.lines()[3]   # "x=42"

    # If the block raises, nothing is delivered and the text is kept for the
    # next successful emission on the same line.

Exported names:
    MAX_SLOTS:      Number of addressable lines (20).
    LogLine:        Immutable handle to one line; call it to open a LogStream.
    make_log_line:  Convenience constructor for LogLine.
    LogStream:      Scoped writer returned by LogLine(); supports ``<<``.
    LogSink:        Abstract base for receivers of completed lines.
    bind_log_sink:  Write-once, process-wide binding of the active sink.
    get_log_sink:   Return the bound sink, or None.
    StreamSink:     Writes each line to a stream (default: stderr).
    OverlaySink:    Keeps the latest text of each line for display.
    LoggingSink:    Forwards each line to a ``logging.Logger``.
"""

from .binding import bind_log_sink, get_log_sink
from .errors import (
    AlreadyBound,
    InvalidSlot,
    NoSinkBound,
    SinkNotReady,
    SlotLogError,
    StreamClosed,
)
from .line import LogLine, make_log_line
from .sink import MAX_SLOTS, LogSink
from .sinks import LoggingSink, OverlaySink, StreamSink
from .stream import LogStream

__all__ = [
    "MAX_SLOTS",
    "LogLine",
    "make_log_line",
    "LogStream",
    "LogSink",
    "bind_log_sink",
    "get_log_sink",
    "StreamSink",
    "OverlaySink",
    "LoggingSink",
    "SlotLogError",
    "InvalidSlot",
    "NoSinkBound",
    "AlreadyBound",
    "SinkNotReady",
    "StreamClosed",
]
