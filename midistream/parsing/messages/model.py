from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional

from midistream.parsing.messages.controllers import controller_name
from midistream.parsing.messages.kinds import (
    CHANNEL_MODE_KINDS,
    REALTIME_KINDS,
    MessageKind,
)


@dataclass
class MidiMessage:
    """
    A fully decoded MIDI message.

    Attributes:
        kind: The message kind. Never ``MessageKind.NONE``.
        channel: Channel 0-15 for channel voice and channel-mode messages,
            ``None`` for system messages.
    """
    kind: MessageKind
    channel: Optional[int]

    def payload(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("kind", "channel")
        }

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.name.lower(), "channel": self.channel}
        data.update(self.payload())
        return data


@dataclass
class NoteMessage(MidiMessage):
    note: int
    velocity: int


@dataclass
class PolyKeyPressureMessage(MidiMessage):
    key: int
    pressure: int


@dataclass
class ControlChangeMessage(MidiMessage):
    controller: int
    value: int

    @property
    def is_channel_mode(self) -> bool:
        return self.kind in CHANNEL_MODE_KINDS

    @property
    def controller_name(self) -> str:
        return controller_name(self.controller)


@dataclass
class ProgramChangeMessage(MidiMessage):
    program: int


@dataclass
class ChannelPressureMessage(MidiMessage):
    pressure: int


@dataclass
class PitchBendMessage(MidiMessage):
    value: int


@dataclass
class MtcQuarterFrameMessage(MidiMessage):
    mtc_type: int
    mtc_value: int


@dataclass
class SongPositionMessage(MidiMessage):
    position: int


@dataclass
class SongSelectMessage(MidiMessage):
    song: int


@dataclass
class SystemMessage(MidiMessage):
    """SysEx start/end, Tune Request and the real-time messages; no payload."""

    @property
    def is_realtime(self) -> bool:
        return self.kind in REALTIME_KINDS


# Message variant used for each kind.
MESSAGE_TYPES: dict[MessageKind, type[MidiMessage]] = {
    MessageKind.NOTE_OFF: NoteMessage,
    MessageKind.NOTE_ON: NoteMessage,
    MessageKind.POLY_KEY_PRESSURE: PolyKeyPressureMessage,
    MessageKind.CONTROL_CHANGE: ControlChangeMessage,
    **{kind: ControlChangeMessage for kind in CHANNEL_MODE_KINDS},
    MessageKind.PROGRAM_CHANGE: ProgramChangeMessage,
    MessageKind.CHANNEL_PRESSURE: ChannelPressureMessage,
    MessageKind.PITCH_BEND: PitchBendMessage,
    MessageKind.SYSTEM_EXCLUSIVE: SystemMessage,
    MessageKind.MTC_QUARTER_FRAME: MtcQuarterFrameMessage,
    MessageKind.SONG_POSITION_POINTER: SongPositionMessage,
    MessageKind.SONG_SELECT: SongSelectMessage,
    MessageKind.TUNE_REQUEST: SystemMessage,
    MessageKind.END_OF_EXCLUSIVE: SystemMessage,
    **{kind: SystemMessage for kind in REALTIME_KINDS},
}
