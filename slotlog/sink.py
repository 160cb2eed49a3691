"""sink.py - Abstract receiver for completed log lines.

LogSink owns the slot table: one ``io.StringIO`` buffer per addressable line.
LogStream instances write into these buffers while an expression is being
built, and the sink receives the finished text through ``on_log()``.

The buffers are deliberately not part of the public API. Only LogLine and
LogStream reach them, through ``_SinkAttorney``, which keeps every stream
pointed at a buffer that lives inside the currently bound sink.

Frame bookkeeping:
    Overlays typically redraw once per frame. Each successful flush marks its
    slot as *hit*. ``clear_log_for_next_frame()`` reports every slot that was
    not hit since the previous call, drops any text still pending in those
    buffers, and starts a new frame.
"""

import io
import logging
import operator
from abc import ABC, abstractmethod
from typing import List

from .errors import InvalidSlot, SinkNotReady

logger = logging.getLogger(__name__)

# Fixed number of addressable log lines.
MAX_SLOTS = 20


def to_slot(slot: object) -> int:
    """Return ``slot`` as a plain int in ``[0, MAX_SLOTS)``.

    Any integer type is accepted (``int``, ``IntEnum`` members, numpy
    integers); ``bool`` is rejected.

    Raises:
        InvalidSlot: If ``slot`` is not an integer or is out of range.
    """
    if isinstance(slot, bool):
        raise InvalidSlot(slot, MAX_SLOTS)
    try:
        index = int(operator.index(slot))
    except TypeError:
        raise InvalidSlot(slot, MAX_SLOTS) from None
    if not 0 <= index < MAX_SLOTS:
        raise InvalidSlot(slot, MAX_SLOTS)
    return index


def _empty(buf: io.StringIO) -> None:
    # Truncate in place: an open LogStream may still hold this buffer.
    buf.seek(0)
    buf.truncate()


class LogSink(ABC):
    """Base class for every destination of slot log lines.

    Subclasses implement ``on_log()`` and may override ``on_line_stale()``.
    ``setup_log_sink()`` must be called before the sink is bound with
    ``bind_log_sink()``; subclasses usually do this in ``__init__``.

    Example:
        >>> class PrintSink(LogSink):
        ...     def __init__(self):
        ...         self.setup_log_sink()
        ...     def on_log(self, slot, text):
        ...         print(slot, text)
    """

    _streams: List[io.StringIO]
    _hit_on_this_frame: List[bool]

    def setup_log_sink(self) -> None:
        """Allocate ``MAX_SLOTS`` empty buffers and reset frame marks.

        Calling this again empties every existing buffer in place, so
        streams that are still open keep writing into the slot table.
        """
        if self.is_set_up:
            for buf in self._streams:
                _empty(buf)
        else:
            self._streams = [io.StringIO() for _ in range(MAX_SLOTS)]
        self._hit_on_this_frame = [False] * MAX_SLOTS
        logger.debug("%s: slot table set up (%d slots)", type(self).__name__, MAX_SLOTS)

    @property
    def is_set_up(self) -> bool:
        """True once ``setup_log_sink()`` has allocated the slot table."""
        return getattr(self, "_streams", None) is not None

    @abstractmethod
    def on_log(self, slot: int, text: str) -> None:
        """Receive the complete text of one emission.

        Called synchronously from the releasing thread, exactly once per
        successful LogStream release.

        Args:
            slot: Index of the line, always in ``[0, MAX_SLOTS)``.
            text: Everything inserted into the slot since its buffer was last
                emptied. May be empty.
        """

    def on_line_stale(self, slot: int) -> None:
        """Hook called by ``clear_log_for_next_frame()`` for un-hit slots."""

    def clear_line(self, slot: int) -> None:
        """Discard the text pending in one slot buffer without delivering it.

        Raises:
            InvalidSlot: If ``slot`` is outside ``[0, MAX_SLOTS)``.
            SinkNotReady: If ``setup_log_sink()`` has not been called.
        """
        _empty(_SinkAttorney.stream_for(self, to_slot(slot)))

    def clear_log_for_next_frame(self) -> List[int]:
        """Close the current frame and return the slots that were not hit.

        Pending text in each stale slot is dropped and ``on_line_stale()`` is
        invoked for it, in ascending slot order. All hit marks are then reset.

        Returns:
            Stale slot indices in ascending order. Empty if every line was
            emitted during the frame.

        Raises:
            SinkNotReady: If ``setup_log_sink()`` has not been called.
        """
        _require_set_up(self)
        stale = [slot for slot, hit in enumerate(self._hit_on_this_frame) if not hit]
        for slot in stale:
            _empty(self._streams[slot])
            self.on_line_stale(slot)
        self._hit_on_this_frame = [False] * MAX_SLOTS
        if stale:
            logger.debug("%s: %d stale line(s) this frame", type(self).__name__, len(stale))
        return stale


def _require_set_up(sink: LogSink) -> None:
    if not sink.is_set_up:
        raise SinkNotReady(
            f"{type(sink).__name__}: setup_log_sink() has not been called."
        )


class _SinkAttorney:
    """Grants LogLine and LogStream access to a sink's private slot table."""

    @staticmethod
    def stream_for(sink: LogSink, slot: int) -> io.StringIO:
        _require_set_up(sink)
        return sink._streams[slot]

    @staticmethod
    def update_log_for_line(sink: LogSink, slot: int) -> None:
        """Deliver the buffered text for ``slot`` and then empty the buffer.

        The buffer is only emptied after ``on_log`` returns, so an exception
        raised by the sink leaves the text in place.
        """
        buf = _SinkAttorney.stream_for(sink, slot)
        sink.on_log(slot, buf.getvalue())
        _empty(buf)
        sink._hit_on_this_frame[slot] = True
