from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from midistream.parsing.messages.kinds import MessageKind

# Largest number of data bytes any message needs.
BUFFER_SIZE = 2

MIDI_CHANNELS = range(16)


@dataclass
class ParserState:
    """
    Decode state for one MIDI byte stream.

    Each independent input (one physical port, one file) needs its own
    instance. The state is only changed by ``decode``, ``init_state`` and
    ``reset``.

    Attributes:
        pending_kind: Kind selected by the last status byte (running status).
        pending_channel: Channel of the last channel voice status byte.
        active_channel: Channel filter slot. Stored and returned as-is; the
            decoder never reads it.
        buffer: Data bytes collected for the pending message.
        count: How many bytes of ``buffer`` are in use (0-2).
    """
    pending_kind: MessageKind = MessageKind.NONE
    pending_channel: Optional[int] = None
    active_channel: Optional[int] = None
    buffer: bytearray = field(default_factory=lambda: bytearray(BUFFER_SIZE))
    count: int = 0

    def clear_running_status(self) -> None:
        self.pending_kind = MessageKind.NONE
        self.pending_channel = None
        self.count = 0


def init_state(state: ParserState) -> None:
    if state is None:
        return
    state.pending_kind = MessageKind.NONE
    state.pending_channel = None
    state.active_channel = None
    state.buffer[:] = bytes(BUFFER_SIZE)
    state.count = 0


def reset(state: ParserState) -> None:
    """Discard running status and any partially collected message."""
    init_state(state)


def set_active_channel(state: ParserState, channel: Optional[int]) -> None:
    if state is None:
        return
    if channel is not None and (not isinstance(channel, int) or channel not in MIDI_CHANNELS):
        raise ValueError("channel must be between 0 and 15 or None")
    state.active_channel = channel


def get_active_channel(state: ParserState) -> Optional[int]:
    if state is None:
        return None
    return state.active_channel
