"""Tests for interrupted, abandoned and corrupted message sequences."""
import pytest

from midistream import MessageKind, ParserState, decode
from midistream.parsing.stream.decode import _decode_data_byte

REALTIME_BYTES = [0xF8, 0xFA, 0xFB, 0xFC, 0xFE, 0xFF]
UNDEFINED_BYTES = [0xF4, 0xF5, 0xF9, 0xFD]


class TestChannelMessageInterruption:
    @pytest.mark.parametrize("interruption", REALTIME_BYTES)
    def test_realtime_byte_between_data_bytes(self, interruption):
        state = ParserState()
        assert decode(state, 0x90) == (MessageKind.NONE, None)
        assert decode(state, 60) == (MessageKind.NONE, None)

        kind, message = decode(state, interruption)
        assert kind == MessageKind(interruption)
        assert message.kind == MessageKind(interruption)
        assert message.channel is None
        assert state.pending_kind == MessageKind.NOTE_ON
        assert state.pending_channel == 0
        assert state.count == 1

        kind, message = decode(state, 100)
        assert kind == MessageKind.NOTE_ON
        assert (message.channel, message.note, message.velocity) == (0, 60, 100)
        assert state.count == 0

    def test_many_realtime_bytes_between_data_bytes(self):
        state = ParserState()
        decode(state, 0xE3)
        decode(state, 0x00)
        for byte in REALTIME_BYTES * 3:
            kind, _ = decode(state, byte)
            assert kind == MessageKind(byte)
        kind, message = decode(state, 0x40)
        assert kind == MessageKind.PITCH_BEND
        assert message.value == 8192
        assert message.channel == 3

    @pytest.mark.parametrize("interruption", UNDEFINED_BYTES)
    def test_undefined_byte_between_data_bytes(self, interruption):
        state = ParserState()
        decode(state, 0x90)
        decode(state, 60)

        assert decode(state, interruption) == (MessageKind.NONE, None)
        assert state.pending_kind == MessageKind.NOTE_ON
        assert state.count == 1

        kind, message = decode(state, 100)
        assert kind == MessageKind.NOTE_ON
        assert (message.note, message.velocity) == (60, 100)

    def test_new_status_abandons_partial_message(self):
        state = ParserState()
        decode(state, 0x90)
        assert decode(state, 60) == (MessageKind.NONE, None)
        assert state.count == 1

        assert decode(state, 0xC0) == (MessageKind.NONE, None)
        assert state.pending_kind == MessageKind.PROGRAM_CHANGE
        assert state.count == 0

        kind, message = decode(state, 42)
        assert kind == MessageKind.PROGRAM_CHANGE
        assert message.program == 42

    def test_system_common_status_abandons_partial_message(self):
        state = ParserState()
        decode(state, 0xB0)
        decode(state, 7)
        decode(state, 0xF3)
        kind, message = decode(state, 7)
        assert kind == MessageKind.SONG_SELECT
        assert message.song == 7


class TestSysexInterruption:
    @pytest.mark.parametrize("interruption", REALTIME_BYTES)
    def test_realtime_byte_inside_sysex(self, interruption):
        state = ParserState()
        kind, _ = decode(state, 0xF0)
        assert kind == MessageKind.SYSTEM_EXCLUSIVE
        assert decode(state, 0x0A) == (MessageKind.NONE, None)

        kind, message = decode(state, interruption)
        assert kind == MessageKind(interruption)
        assert message.channel is None
        assert state.pending_kind == MessageKind.SYSTEM_EXCLUSIVE
        assert state.count == 0

        assert decode(state, 0x05) == (MessageKind.NONE, None)
        kind, _ = decode(state, 0xF7)
        assert kind == MessageKind.END_OF_EXCLUSIVE
        assert state.pending_kind == MessageKind.NONE

    @pytest.mark.parametrize("interruption", UNDEFINED_BYTES)
    def test_undefined_byte_inside_sysex(self, interruption):
        state = ParserState()
        decode(state, 0xF0)
        decode(state, 0x0A)
        assert decode(state, interruption) == (MessageKind.NONE, None)
        assert state.pending_kind == MessageKind.SYSTEM_EXCLUSIVE
        assert decode(state, 0x05) == (MessageKind.NONE, None)
        kind, _ = decode(state, 0xF7)
        assert kind == MessageKind.END_OF_EXCLUSIVE

    def test_sysex_without_end_is_abandoned_by_new_status(self):
        state = ParserState()
        decode(state, 0xF0)
        decode(state, 0x10)
        decode(state, 0x20)

        assert decode(state, 0x90) == (MessageKind.NONE, None)
        assert state.pending_kind == MessageKind.NOTE_ON
        assert decode(state, 60) == (MessageKind.NONE, None)
        assert state.pending_channel == 0
        kind, message = decode(state, 100)
        assert kind == MessageKind.NOTE_ON
        assert (message.note, message.velocity) == (60, 100)

    def test_second_sysex_start_restarts_sysex(self):
        state = ParserState()
        decode(state, 0xF0)
        decode(state, 0x7E)
        kind, _ = decode(state, 0xF0)
        assert kind == MessageKind.SYSTEM_EXCLUSIVE
        assert state.pending_kind == MessageKind.SYSTEM_EXCLUSIVE


class TestOverflowGuard:
    def test_two_byte_overflow_resets_count(self):
        state = ParserState()
        decode(state, 0x90)
        state.count = 2  # corrupted

        assert decode(state, 60) == (MessageKind.NONE, None)
        assert state.count == 0

        # Decoding resumes normally afterwards.
        decode(state, 60)
        kind, message = decode(state, 100)
        assert kind == MessageKind.NOTE_ON
        assert message.note == 60

    def test_one_byte_overflow_resets_count(self):
        state = ParserState()
        decode(state, 0xC0)
        state.count = 1  # corrupted

        assert decode(state, 5) == (MessageKind.NONE, None)
        assert state.count == 0
        kind, message = decode(state, 5)
        assert kind == MessageKind.PROGRAM_CHANGE
        assert message.program == 5

    @pytest.mark.parametrize("byte", [0x80, 0xF8, 0xFF])
    def test_data_path_ignores_high_bytes(self, byte):
        state = ParserState()
        decode(state, 0x90)
        decode(state, 60)

        assert _decode_data_byte(state, byte) == (MessageKind.NONE, None)
        assert state.pending_kind == MessageKind.NOTE_ON
        assert state.count == 1
        assert state.buffer[0] == 60

        kind, message = decode(state, 100)
        assert kind == MessageKind.NOTE_ON
        assert (message.note, message.velocity) == (60, 100)

    def test_count_beyond_buffer_resets(self):
        state = ParserState()
        decode(state, 0xF0)
        state.count = 7  # corrupted

        assert decode(state, 1) == (MessageKind.NONE, None)
        assert state.count == 0
        assert state.pending_kind == MessageKind.SYSTEM_EXCLUSIVE
