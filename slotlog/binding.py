"""binding.py - Process-wide, write-once reference to the active LogSink.

Startup code builds a sink, calls ``setup_log_sink()`` on it and binds it once
with ``bind_log_sink()``. Every ``LogLine()`` call afterwards looks the sink up
here. There is no unbind: the bound sink is expected to live for the active
phase of the process.

Not thread-safe. Bind before any thread opens a LogStream.
"""

import logging
from typing import Optional

from .errors import AlreadyBound, SinkNotReady
from .sink import LogSink

logger = logging.getLogger(__name__)

_active_sink: Optional[LogSink] = None


def bind_log_sink(sink: Optional[LogSink]) -> None:
    """Make ``sink`` the process-wide receiver of log lines.

    Binding ``None`` while nothing is bound is a no-op.

    Args:
        sink: A LogSink whose ``setup_log_sink()`` has already been called.

    Raises:
        AlreadyBound: If a sink is already bound. The first sink stays active.
        SinkNotReady: If ``sink`` has no slot table yet.
    """
    global _active_sink
    if _active_sink is not None:
        raise AlreadyBound(
            f"bind_log_sink: a sink ({type(_active_sink).__name__}) is already "
            f"bound and may not be assigned more than once."
        )
    if sink is not None and not sink.is_set_up:
        raise SinkNotReady(
            f"bind_log_sink: {type(sink).__name__}.setup_log_sink() must be "
            f"called before binding."
        )
    _active_sink = sink
    if sink is not None:
        logger.debug("Bound %s as the process-wide log sink", type(sink).__name__)


def get_log_sink() -> Optional[LogSink]:
    """Return the bound LogSink, or None if nothing has been bound yet."""
    return _active_sink
