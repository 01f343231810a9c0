"""
Byte-at-a-time MIDI 1.0 decoder.

``decode`` consumes exactly one byte, updates the caller's ``ParserState`` and
reports at most one completed message. Bytes that cannot be used (undefined
status bytes, stray data bytes, SysEx payload) are absorbed silently.
"""
from __future__ import annotations

from typing import Optional, Tuple

from midistream.core.binary import high_nibble, is_byte, is_data_byte, is_status_byte, join_14bit, low_nibble
from midistream.parsing.messages.controllers import channel_mode_kind
from midistream.parsing.messages.kinds import (
    CHANNEL_VOICE_KINDS,
    DATA_LENGTH,
    PENDING_SYSTEM_KINDS,
    REALTIME_KINDS,
    TERMINAL_SYSTEM_KINDS,
    MessageKind,
    kind_for_status,
)
from midistream.parsing.messages.model import (
    ChannelPressureMessage,
    ControlChangeMessage,
    MidiMessage,
    MtcQuarterFrameMessage,
    NoteMessage,
    PitchBendMessage,
    PolyKeyPressureMessage,
    ProgramChangeMessage,
    SongPositionMessage,
    SongSelectMessage,
    SystemMessage,
)
from midistream.parsing.stream.state import BUFFER_SIZE, ParserState

DecodeResult = Tuple[MessageKind, Optional[MidiMessage]]

NO_MESSAGE: DecodeResult = (MessageKind.NONE, None)


def decode(state: ParserState, byte: int) -> DecodeResult:
    """
    Feed one byte to the decoder.

    Args:
        state: The stream's parser state; updated in place.
        byte: The next byte from the stream, 0-255.

    Returns:
        ``(kind, message)`` where ``kind`` is ``MessageKind.NONE`` and
        ``message`` is ``None`` unless this byte completed a message. For a
        completed message ``kind == message.kind``.
    """
    if state is None or not is_byte(byte):
        return NO_MESSAGE
    if is_status_byte(byte):
        return _decode_status_byte(state, byte)
    return _decode_data_byte(state, byte)


def _completed(message: MidiMessage) -> DecodeResult:
    return message.kind, message


def _decode_status_byte(state: ParserState, byte: int) -> DecodeResult:
    kind = kind_for_status(byte)

    if kind in CHANNEL_VOICE_KINDS:
        state.pending_kind = kind
        state.pending_channel = low_nibble(byte)
        state.count = 0
        return NO_MESSAGE

    if kind == MessageKind.SYSTEM_EXCLUSIVE:
        state.pending_kind = kind
        state.pending_channel = None
        state.count = 0
        return _completed(SystemMessage(kind=kind, channel=None))

    if kind in PENDING_SYSTEM_KINDS:
        state.pending_kind = kind
        state.pending_channel = None
        state.count = 0
        return NO_MESSAGE

    if kind in TERMINAL_SYSTEM_KINDS:
        state.clear_running_status()
        return _completed(SystemMessage(kind=kind, channel=None))

    if kind in REALTIME_KINDS:
        # Running status and any partial message survive real-time bytes.
        return _completed(SystemMessage(kind=kind, channel=None))

    # Undefined status byte: leave running status alone.
    return NO_MESSAGE


def _decode_data_byte(state: ParserState, byte: int) -> DecodeResult:
    if not is_data_byte(byte):
        return NO_MESSAGE

    kind = state.pending_kind
    capacity = DATA_LENGTH.get(kind, 0)
    if state.count >= BUFFER_SIZE or state.count >= max(capacity, 1):
        state.count = 0
        return NO_MESSAGE

    if capacity == 2:
        state.buffer[state.count] = byte
        state.count += 1
        if state.count < 2:
            return NO_MESSAGE
        state.count = 0
        return _completed(_two_byte_message(state, kind, state.buffer[0], state.buffer[1]))

    if kind == MessageKind.PROGRAM_CHANGE:
        state.count = 0
        return _completed(ProgramChangeMessage(kind=kind, channel=state.pending_channel, program=byte))

    if kind == MessageKind.CHANNEL_PRESSURE:
        state.count = 0
        return _completed(ChannelPressureMessage(kind=kind, channel=state.pending_channel, pressure=byte))

    if kind == MessageKind.MTC_QUARTER_FRAME:
        state.clear_running_status()
        return _completed(
            MtcQuarterFrameMessage(kind=kind, channel=None, mtc_type=high_nibble(byte), mtc_value=low_nibble(byte))
        )

    if kind == MessageKind.SONG_SELECT:
        state.clear_running_status()
        return _completed(SongSelectMessage(kind=kind, channel=None, song=byte))

    # SysEx payload, or no pending kind that takes data.
    return NO_MESSAGE


def _two_byte_message(state: ParserState, kind: MessageKind, first: int, second: int) -> MidiMessage:
    channel = state.pending_channel

    if kind == MessageKind.NOTE_ON:
        # Note On with velocity 0 means Note Off; running status stays Note On.
        completed_kind = MessageKind.NOTE_OFF if second == 0 else MessageKind.NOTE_ON
        return NoteMessage(kind=completed_kind, channel=channel, note=first, velocity=second)

    if kind == MessageKind.NOTE_OFF:
        return NoteMessage(kind=kind, channel=channel, note=first, velocity=second)

    if kind == MessageKind.POLY_KEY_PRESSURE:
        return PolyKeyPressureMessage(kind=kind, channel=channel, key=first, pressure=second)

    if kind == MessageKind.CONTROL_CHANGE:
        return ControlChangeMessage(kind=channel_mode_kind(first), channel=channel, controller=first, value=second)

    if kind == MessageKind.PITCH_BEND:
        return PitchBendMessage(kind=kind, channel=channel, value=join_14bit(first, second))

    # Song Position Pointer is system common, so it ends running status.
    state.clear_running_status()
    return SongPositionMessage(kind=kind, channel=None, position=join_14bit(first, second))
