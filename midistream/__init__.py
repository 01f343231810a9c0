from midistream.parsing.messages import Controller, MessageKind, MidiMessage, controller_name
from midistream.parsing.stream import (
    MidiParser,
    ParserState,
    decode,
    get_active_channel,
    init_state,
    iter_messages,
    parse_all,
    reset,
    set_active_channel,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Controller",
    "MessageKind",
    "MidiMessage",
    "MidiParser",
    "ParserState",
    "controller_name",
    "decode",
    "get_active_channel",
    "init_state",
    "iter_messages",
    "parse_all",
    "reset",
    "set_active_channel",
]

try:
    __version__ = version("midistream")
except PackageNotFoundError:
    __version__ = "0.0.0"
