"""
MIDI 1.0 byte stream decoding.

This sub-package holds the per-stream parser state, the byte-at-a-time
``decode`` state machine, and ``MidiParser``, a buffered wrapper for callers
that receive bytes in chunks.
"""
from midistream.parsing.stream.decode import NO_MESSAGE, DecodeResult, decode
from midistream.parsing.stream.parser import MidiParser, iter_messages, parse_all
from midistream.parsing.stream.state import (
    BUFFER_SIZE,
    ParserState,
    get_active_channel,
    init_state,
    reset,
    set_active_channel,
)

__all__ = [
    "BUFFER_SIZE",
    "NO_MESSAGE",
    "DecodeResult",
    "MidiParser",
    "ParserState",
    "decode",
    "get_active_channel",
    "init_state",
    "iter_messages",
    "parse_all",
    "reset",
    "set_active_channel",
]
