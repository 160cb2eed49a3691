"""errors.py - Exception hierarchy for slotlog.

Every error raised by the library derives from ``SlotLogError`` and from the
builtin exception that best describes it, so callers can catch either one:

    InvalidSlot: a LogLine was constructed with an out-of-range slot.
    NoSinkBound: a stream was opened before any sink was bound.
    AlreadyBound: a second sink was bound process-wide.
    SinkNotReady: a sink was bound before ``setup_log_sink()`` ran.
    StreamClosed: a LogStream was used after its release.

Exceptions raised by user values while they are serialised are *not* wrapped;
they propagate unchanged and suppress the flush of the enclosing stream.
"""


class SlotLogError(Exception):
    """Base class for all slotlog errors."""


class InvalidSlot(SlotLogError, ValueError):
    """Raised when a slot index falls outside ``[0, MAX_SLOTS)``.

    Attributes:
        slot: The rejected value, exactly as passed by the caller.
    """

    def __init__(self, slot: object, max_slots: int) -> None:
        self.slot = slot
        super().__init__(
            f"Line assignment must be between zero and the maximum "
            f"({max_slots}), got {slot!r}."
        )


class NoSinkBound(SlotLogError, RuntimeError):
    """Raised when a LogLine is opened while no sink is bound."""


class AlreadyBound(SlotLogError, RuntimeError):
    """Raised when binding a sink while another one is already active."""


class SinkNotReady(SlotLogError, RuntimeError):
    """Raised when a sink without a slot table is bound or used."""


class StreamClosed(SlotLogError, RuntimeError):
    """Raised when a LogStream is used after it was flushed or suppressed."""
