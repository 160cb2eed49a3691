"""sinks.py - Ready-made LogSink implementations.

    StreamSink: writes each emission as one line to a writable stream
                 (default: stderr).
    OverlaySink: keeps the latest text per slot, for drawing a debug overlay.
    LoggingSink: forwards each emission to a standard ``logging.Logger``.

All three call ``setup_log_sink()`` in ``__init__`` and can be bound directly:

    from slotlog import OverlaySink, bind_log_sink

    overlay = OverlaySink()
    bind_log_sink(overlay)
"""

import logging
import sys
from typing import List, Optional

from .sink import MAX_SLOTS, LogSink


class StreamSink(LogSink):
    """Write every emission to a stream as ``[NN] text``.

    Output format::

        [00] fps=59.9
        [03] x=42

    Example:
        >>> import sys
        >>> from slotlog.sinks import StreamSink
        >>> sink = StreamSink(stream=sys.stdout)
    """

    def __init__(self, stream=None, show_slot: bool = True) -> None:
        """Initialise the stream sink.

        Args:
            stream: A writable file-like object. Defaults to ``sys.stderr``
                so line output does not pollute the application's stdout.
            show_slot: If False, the ``[NN]`` prefix is omitted.
        """
        self._stream = stream or sys.stderr
        self._show_slot = show_slot
        self.setup_log_sink()

    def on_log(self, slot: int, text: str) -> None:
        if self._show_slot:
            print(f"[{slot:02d}] {text}", file=self._stream)
        else:
            print(text, file=self._stream)


class OverlaySink(LogSink):
    """Hold the most recent text of every line, overwriting older text.

    The overlay is a fixed grid of ``MAX_SLOTS`` rows. Emitting on slot N
    replaces row N. Rows not written during a frame are blanked when the
    frame is closed with ``clear_log_for_next_frame()``.

    Example:
        >>> from slotlog import OverlaySink, bind_log_sink, make_log_line
        >>> overlay = OverlaySink()
        >>> bind_log_sink(overlay)
        >>> make_log_line(2).emit("hp=", 10)
        >>> overlay.lines()[2]
        'hp=10'
    """

    def __init__(self) -> None:
        self._rows: List[str] = [""] * MAX_SLOTS
        self.setup_log_sink()

    def on_log(self, slot: int, text: str) -> None:
        self._rows[slot] = text

    def on_line_stale(self, slot: int) -> None:
        self._rows[slot] = ""

    def lines(self) -> List[str]:
        """Return a copy of all ``MAX_SLOTS`` rows, blank rows included."""
        return list(self._rows)

    def render(self, skip_blank: bool = False) -> str:
        """Join the rows with newlines, optionally dropping blank ones."""
        rows = [r for r in self._rows if r] if skip_blank else self._rows
        return "\n".join(rows)


class LoggingSink(LogSink):
    """Forward every emission to a ``logging.Logger``.

    Each line becomes one record, ``"line %d: %s"``, at the configured level.
    Handlers, formatting and filtering are left to the logging setup of the
    application.

    Attributes:
        logger (logging.Logger): Destination logger.
        level (int): Level used for every record.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
    ) -> None:
        self.logger = logger or logging.getLogger("slotlog.lines")
        self.level = level
        self.setup_log_sink()

    def on_log(self, slot: int, text: str) -> None:
        self.logger.log(self.level, "line %d: %s", slot, text)
