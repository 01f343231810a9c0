from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, Optional

from midistream.parsing.messages.model import MidiMessage
from midistream.parsing.stream.decode import decode
from midistream.parsing.stream.state import (
    ParserState,
    get_active_channel,
    reset,
    set_active_channel,
)


class MidiParser:
    """
    Buffered decoder for one MIDI byte stream.

    Wraps a ``ParserState`` and queues every completed message so callers can
    feed arbitrary chunks of bytes and drain messages by iterating.
    """

    def __init__(self, data: Optional[Iterable[int]] = None) -> None:
        self._state = ParserState()
        self.messages: Deque[MidiMessage] = deque()
        if data is not None:
            self.feed(data)

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def active_channel(self) -> Optional[int]:
        return get_active_channel(self._state)

    @active_channel.setter
    def active_channel(self, channel: Optional[int]) -> None:
        set_active_channel(self._state, channel)

    def feed_byte(self, byte: int) -> Optional[MidiMessage]:
        _, message = decode(self._state, byte)
        if message is not None:
            self.messages.append(message)
        return message

    def feed(self, data: Iterable[int]) -> int:
        """
        Feed a chunk of bytes.

        Args:
            data: Any iterable of ints in 0-255, such as ``bytes`` or a list.

        Returns:
            The number of messages completed by this chunk.
        """
        completed = 0
        for byte in data:
            if self.feed_byte(byte) is not None:
                completed += 1
        return completed

    def reset(self) -> None:
        # Drops queued messages along with the partial one.
        reset(self._state)
        self.messages.clear()

    def get_message(self) -> Optional[MidiMessage]:
        if self.messages:
            return self.messages.popleft()
        return None

    def pending(self) -> int:
        return len(self.messages)

    __len__ = pending

    def __iter__(self) -> Iterator[MidiMessage]:
        while self.messages:
            yield self.messages.popleft()


def iter_messages(data: Iterable[int]) -> Iterator[MidiMessage]:
    state = ParserState()
    for byte in data:
        _, message = decode(state, byte)
        if message is not None:
            yield message


def parse_all(data: Iterable[int]) -> list[MidiMessage]:
    """Decode a complete chunk of bytes with a fresh parser."""
    return list(iter_messages(data))
