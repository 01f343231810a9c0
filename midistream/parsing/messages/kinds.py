"""
Message kinds for the MIDI 1.0 byte stream.

Status kinds carry the value of their status byte (channel voice kinds use the
high nibble only). Channel-mode kinds carry the controller number that selects
them, since they arrive on the wire as Control Change messages.
"""
from __future__ import annotations

from enum import IntEnum


class MessageKind(IntEnum):
    NONE = 0x00

    # Channel voice
    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_KEY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0

    # Channel mode (Control Change 120-127)
    ALL_SOUND_OFF = 0x78
    RESET_ALL_CONTROLLERS = 0x79
    LOCAL_CONTROL = 0x7A
    ALL_NOTES_OFF = 0x7B
    OMNI_OFF = 0x7C
    OMNI_ON = 0x7D
    MONO_ON = 0x7E
    POLY_ON = 0x7F

    # System common
    SYSTEM_EXCLUSIVE = 0xF0
    MTC_QUARTER_FRAME = 0xF1
    SONG_POSITION_POINTER = 0xF2
    SONG_SELECT = 0xF3
    TUNE_REQUEST = 0xF6
    END_OF_EXCLUSIVE = 0xF7

    # System real-time
    TIMING_CLOCK = 0xF8
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSE = 0xFE
    SYSTEM_RESET = 0xFF

    @property
    def is_channel_voice(self) -> bool:
        return self in CHANNEL_VOICE_KINDS

    @property
    def is_channel_mode(self) -> bool:
        return self in CHANNEL_MODE_KINDS

    @property
    def is_system_common(self) -> bool:
        return self in SYSTEM_COMMON_KINDS

    @property
    def is_realtime(self) -> bool:
        return self in REALTIME_KINDS

    @property
    def data_length(self) -> int:
        return DATA_LENGTH.get(self, 0)


CHANNEL_VOICE_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.NOTE_OFF,
    MessageKind.NOTE_ON,
    MessageKind.POLY_KEY_PRESSURE,
    MessageKind.CONTROL_CHANGE,
    MessageKind.PROGRAM_CHANGE,
    MessageKind.CHANNEL_PRESSURE,
    MessageKind.PITCH_BEND,
})

CHANNEL_MODE_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.ALL_SOUND_OFF,
    MessageKind.RESET_ALL_CONTROLLERS,
    MessageKind.LOCAL_CONTROL,
    MessageKind.ALL_NOTES_OFF,
    MessageKind.OMNI_OFF,
    MessageKind.OMNI_ON,
    MessageKind.MONO_ON,
    MessageKind.POLY_ON,
})

SYSTEM_COMMON_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.SYSTEM_EXCLUSIVE,
    MessageKind.MTC_QUARTER_FRAME,
    MessageKind.SONG_POSITION_POINTER,
    MessageKind.SONG_SELECT,
    MessageKind.TUNE_REQUEST,
    MessageKind.END_OF_EXCLUSIVE,
})

REALTIME_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.TIMING_CLOCK,
    MessageKind.START,
    MessageKind.CONTINUE,
    MessageKind.STOP,
    MessageKind.ACTIVE_SENSE,
    MessageKind.SYSTEM_RESET,
})

# System common kinds that take data bytes and so become the pending kind.
PENDING_SYSTEM_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.MTC_QUARTER_FRAME,
    MessageKind.SONG_POSITION_POINTER,
    MessageKind.SONG_SELECT,
})

# System common kinds that complete on their status byte and end running status.
TERMINAL_SYSTEM_KINDS: frozenset[MessageKind] = frozenset({
    MessageKind.TUNE_REQUEST,
    MessageKind.END_OF_EXCLUSIVE,
})

# Data bytes consumed by each pending kind; kinds not listed consume none.
DATA_LENGTH: dict[MessageKind, int] = {
    MessageKind.NOTE_OFF: 2,
    MessageKind.NOTE_ON: 2,
    MessageKind.POLY_KEY_PRESSURE: 2,
    MessageKind.CONTROL_CHANGE: 2,
    MessageKind.PROGRAM_CHANGE: 1,
    MessageKind.CHANNEL_PRESSURE: 1,
    MessageKind.PITCH_BEND: 2,
    MessageKind.MTC_QUARTER_FRAME: 1,
    MessageKind.SONG_POSITION_POINTER: 2,
    MessageKind.SONG_SELECT: 1,
}

_STATUS_KINDS: dict[int, MessageKind] = {
    kind.value: kind
    for kind in (CHANNEL_VOICE_KINDS | SYSTEM_COMMON_KINDS | REALTIME_KINDS)
}


def kind_for_status(byte: int) -> MessageKind:
    """
    Classify a status byte.

    Channel voice bytes are looked up by their high nibble, system bytes by
    their full value.

    Args:
        byte: A byte with its high bit set.

    Returns:
        The matching ``MessageKind``, or ``MessageKind.NONE`` for undefined
        status bytes (0xF4, 0xF5, 0xF9, 0xFD) and non-status bytes.
    """
    if byte < 0x80 or byte > 0xFF:
        return MessageKind.NONE
    if byte < 0xF0:
        return _STATUS_KINDS[byte & 0xF0]
    return _STATUS_KINDS.get(byte, MessageKind.NONE)
