"""
Typed MIDI 1.0 messages.

This sub-package defines the closed set of message kinds, the controller
number table used by Control Change messages, and one dataclass per message
payload shape.
"""
from midistream.parsing.messages.controllers import (
    CHANNEL_MODE_BY_CONTROLLER,
    CONTROLLER_NAMES,
    Controller,
    channel_mode_kind,
    controller_name,
)
from midistream.parsing.messages.kinds import (
    CHANNEL_MODE_KINDS,
    CHANNEL_VOICE_KINDS,
    DATA_LENGTH,
    REALTIME_KINDS,
    SYSTEM_COMMON_KINDS,
    MessageKind,
    kind_for_status,
)
from midistream.parsing.messages.model import (
    MESSAGE_TYPES,
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

__all__ = [
    "CHANNEL_MODE_BY_CONTROLLER",
    "CHANNEL_MODE_KINDS",
    "CHANNEL_VOICE_KINDS",
    "CONTROLLER_NAMES",
    "DATA_LENGTH",
    "MESSAGE_TYPES",
    "REALTIME_KINDS",
    "SYSTEM_COMMON_KINDS",
    "ChannelPressureMessage",
    "ControlChangeMessage",
    "Controller",
    "MessageKind",
    "MidiMessage",
    "MtcQuarterFrameMessage",
    "NoteMessage",
    "PitchBendMessage",
    "PolyKeyPressureMessage",
    "ProgramChangeMessage",
    "SongPositionMessage",
    "SongSelectMessage",
    "SystemMessage",
    "channel_mode_kind",
    "controller_name",
    "kind_for_status",
]
