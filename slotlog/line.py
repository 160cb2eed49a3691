"""line.py - Validated, immutable handles to numbered log lines.

A LogLine is created once per call site, usually at module scope, and called
to open a LogStream against the process-wide sink:

    fps_line = make_log_line(0)

    def on_frame(fps):
        with fps_line() as out:
            out << "fps=" << fps
"""

from typing import Any

from .binding import get_log_sink
from .errors import NoSinkBound
from .sink import _SinkAttorney, to_slot
from .stream import LogStream


class LogLine:
    """Immutable designator of one slot in ``[0, MAX_SLOTS)``.

    Attributes:
        slot (int): The line index captured at construction.
    """

    __slots__ = ("slot",)

    def __init__(self, slot: int) -> None:
        """Validate and capture ``slot``.

        Raises:
            InvalidSlot: If ``slot`` is not an int in ``[0, MAX_SLOTS)``.
        """
        object.__setattr__(self, "slot", to_slot(slot))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"LogLine is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"LogLine is immutable; cannot delete {name!r}")

    def __call__(self) -> LogStream:
        """Open a LogStream on this line of the bound sink.

        Nothing is written or delivered until values are inserted and the
        stream is released. Use the stream in a ``with`` block or end the
        chain with ``commit()``: a bare ``line() << "x"`` is never delivered,
        its text stays in the slot buffer, and a ResourceWarning is issued
        when the stream is garbage collected.

        Raises:
            NoSinkBound: If ``bind_log_sink()`` has not been called yet.
        """
        sink = get_log_sink()
        if sink is None:
            raise NoSinkBound("Global line receiver has not been assigned.")
        return LogStream(sink, _SinkAttorney.stream_for(sink, self.slot), self.slot)

    def emit(self, *values: object) -> None:
        """Insert ``values`` in order and release, as one expression.

        Equivalent to ``with line() as out: out << v1 << v2 ...``.
        """
        with self() as out:
            for value in values:
                out << value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogLine):
            return NotImplemented
        return self.slot == other.slot

    def __hash__(self) -> int:
        return hash((LogLine, self.slot))

    def __repr__(self) -> str:
        return f"LogLine({self.slot})"

    def __reduce__(self):
        return (LogLine, (self.slot,))


def make_log_line(slot: int) -> LogLine:
    """Return a LogLine for ``slot``; raises InvalidSlot when out of range."""
    return LogLine(slot)
