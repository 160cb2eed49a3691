"""stream.py - Scoped streaming handle for a single log line.

A LogStream is what ``LogLine()`` returns. It appends each ``<<`` operand to
the slot buffer owned by the bound sink, and hands the finished text to the
sink when its scope ends:

    with status_line() as out:
        out << "fps=" << fps << " entities=" << len(world)

Release rules:
    - Normal exit of the ``with`` block: ``sink.on_log(slot, text)`` fires and
      the buffer is emptied.
    - Exit through an exception: nothing is delivered and the buffer keeps its
      text, so the next successful emission on the slot carries both parts.
      The exception always propagates.

Call sites that cannot use ``with`` end the chain with ``commit()`` instead,
which releases as if the block had completed normally.

A stream is released exactly once. Any use afterwards raises StreamClosed.
A stream garbage collected while still open issues a ResourceWarning, as an
unclosed file does.
"""

import io
import logging
import warnings

from .errors import StreamClosed
from .sink import LogSink, _SinkAttorney

logger = logging.getLogger(__name__)

_OPEN = "open"
_FLUSHED = "flushed"
_SUPPRESSED = "suppressed"


class LogStream:
    """Temporary writer bound to one slot buffer of a LogSink.

    Instances are created by LogLine; user code never constructs them. The
    stream owns neither the sink nor the buffer.

    Attributes:
        slot (int): Index of the line this stream writes to.
        state (str): ``"open"``, ``"flushed"`` or ``"suppressed"``.
    """

    __slots__ = ("_sink", "_buffer", "slot", "state")

    def __init__(self, sink: LogSink, buffer: io.StringIO, slot: int) -> None:
        self._sink = sink
        self._buffer = buffer
        self.slot = slot
        self.state = _OPEN

    def __lshift__(self, value: object) -> "LogStream":
        """Append ``str(value)`` to the slot buffer and return this stream.

        Exceptions raised while converting ``value`` propagate unchanged.
        """
        self._check_open()
        self._buffer.write(str(value))
        return self

    def __enter__(self) -> "LogStream":
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None and self.closed:
            # Already released inside the block; let the original error through.
            return False
        self._release(failed=exc_type is not None)
        return False

    def commit(self) -> None:
        """Deliver the buffered text now, for use outside a ``with`` block."""
        self._release(failed=False)

    @property
    def closed(self) -> bool:
        return self.state != _OPEN

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _check_open(self) -> None:
        if self.state != _OPEN:
            raise StreamClosed(
                f"LogStream for line {self.slot} was already {self.state}."
            )

    def _release(self, failed: bool) -> None:
        self._check_open()
        if failed:
            self.state = _SUPPRESSED
            logger.debug(
                "Line %d: flush suppressed by in-flight exception, %d char(s) kept",
                self.slot,
                len(self._buffer.getvalue()),
            )
            return
        # Terminal before delivery: a raising on_log must not allow a retry.
        self.state = _FLUSHED
        _SinkAttorney.update_log_for_line(self._sink, self.slot)

    def __del__(self) -> None:
        if getattr(self, "state", None) == _OPEN:
            warnings.warn(
                f"LogStream for line {self.slot} was never released; "
                f"its text was not delivered",
                ResourceWarning,
                source=self,
            )

    def __repr__(self) -> str:  # pragma: no cover
        return f"LogStream(slot={self.slot}, state={self.state})"
