"""test_line.py - Unit tests for LogLine and make_log_line.

Covers:
    - Construction succeeds exactly for 0 <= slot < MAX_SLOTS
    - InvalidSlot names the maximum and carries the rejected value
    - Integer types (IntEnum, __index__) are accepted; bool, float, str rejected
    - LogLine is immutable, hashable and copyable
    - Opening without a bound sink raises NoSinkBound
    - Opening has no side effects on the sink
"""

import copy
from enum import IntEnum

import pytest

from slotlog import MAX_SLOTS, InvalidSlot, LogLine, LogStream, NoSinkBound, make_log_line

from conftest import pending


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestLogLineConstruction:
    def test_max_slots_is_twenty(self):
        """The number of addressable lines is fixed at 20."""
        assert MAX_SLOTS == 20

    @pytest.mark.parametrize("slot", range(-5, MAX_SLOTS + 5))
    def test_log_line_accepts_exactly_the_valid_range(self, slot):
        """Construction succeeds iff 0 <= slot < MAX_SLOTS."""
        if 0 <= slot < MAX_SLOTS:
            assert LogLine(slot).slot == slot
        else:
            with pytest.raises(InvalidSlot):
                LogLine(slot)

    def test_invalid_slot_message_names_the_maximum(self):
        """The error message mentions MAX_SLOTS and the offending value."""
        with pytest.raises(InvalidSlot) as excinfo:
            LogLine(20)
        assert "20" in str(excinfo.value)
        assert excinfo.value.slot == 20

    def test_invalid_slot_is_a_value_error(self):
        """InvalidSlot can be caught as a plain ValueError."""
        with pytest.raises(ValueError):
            LogLine(-1)

    @pytest.mark.parametrize("slot", [True, 1.0, "1", None])
    def test_log_line_rejects_non_int_slots(self, slot):
        """Non-integer values and bool are not valid slot indices."""
        with pytest.raises(InvalidSlot):
            LogLine(slot)

    def test_log_line_accepts_int_enum_members(self):
        """IntEnum members name rows and are stored as plain ints."""

        class Row(IntEnum):
            FPS = 0
            PLAYER = 5

        line = LogLine(Row.PLAYER)
        assert line.slot == 5
        assert type(line.slot) is int
        assert line == LogLine(5)

    def test_log_line_accepts_objects_with_index(self):
        """Any type implementing __index__ counts as an integer."""

        class Index:
            def __index__(self):
                return 3

        assert LogLine(Index()).slot == 3

    def test_out_of_range_int_enum_is_rejected(self):
        """IntEnum members are range-checked like ints."""

        class Row(IntEnum):
            OFF_SCREEN = 25

        with pytest.raises(InvalidSlot):
            LogLine(Row.OFF_SCREEN)

    def test_make_log_line_returns_log_line(self):
        """make_log_line() is a thin wrapper around LogLine()."""
        assert make_log_line(7) == LogLine(7)

    def test_make_log_line_validates(self):
        """make_log_line() raises InvalidSlot for out-of-range input."""
        with pytest.raises(InvalidSlot):
            make_log_line(MAX_SLOTS)


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------


class TestLogLineValue:
    def test_log_line_cannot_be_retargeted(self):
        """Assigning to slot after construction raises AttributeError."""
        line = LogLine(1)
        with pytest.raises(AttributeError):
            line.slot = 2  # type: ignore[misc]
        assert line.slot == 1

    def test_log_line_rejects_new_attributes(self):
        """LogLine has no room for extra attributes."""
        line = LogLine(1)
        with pytest.raises(AttributeError):
            line.extra = "nope"  # type: ignore[attr-defined]

    def test_log_line_equality_and_hash_follow_slot(self):
        """Two handles to the same slot are equal and hash alike."""
        assert LogLine(4) == LogLine(4)
        assert LogLine(4) != LogLine(5)
        assert len({LogLine(4), LogLine(4), LogLine(5)}) == 2

    def test_log_line_copy_keeps_slot(self):
        """copy.copy() produces an equal handle."""
        line = LogLine(9)
        assert copy.copy(line) == line
        assert copy.deepcopy(line).slot == 9


# ---------------------------------------------------------------------------
# Opening streams
# ---------------------------------------------------------------------------


class TestLogLineOpen:
    def test_open_without_sink_raises_no_sink_bound(self):
        """Calling a LogLine before bind_log_sink() fails with NoSinkBound."""
        line = LogLine(0)
        with pytest.raises(NoSinkBound):
            line()

    def test_open_returns_log_stream_for_slot(self, sink):
        """The returned stream is open and targets the handle's slot."""
        stream = LogLine(6)()
        assert isinstance(stream, LogStream)
        assert stream.slot == 6
        assert not stream.closed
        stream.commit()

    def test_open_has_no_side_effects(self, sink):
        """Opening alone neither calls on_log nor writes to the buffer."""
        stream = LogLine(6)()
        assert sink.calls == []
        assert pending(sink, 6) == ""
        stream.commit()

    def test_emit_inserts_values_and_flushes(self, sink):
        """emit() is one complete streaming expression."""
        LogLine(2).emit("hp=", 10, "/", 12.5)
        assert sink.calls == [(2, "hp=10/12.5")]

    def test_emit_with_no_values_flushes_empty_text(self, sink):
        """emit() with no arguments still delivers once, with empty text."""
        LogLine(2).emit()
        assert sink.calls == [(2, "")]
