from midistream.dump_app.config import DumpSettings, get_settings
from midistream.dump_app.formatting import InvalidHexInputError, format_message, parse_hex_bytes
from midistream.dump_app.logging import RingBufferHandler, create_logger

__all__ = [
    "DumpSettings",
    "InvalidHexInputError",
    "RingBufferHandler",
    "create_logger",
    "format_message",
    "get_settings",
    "parse_hex_bytes",
]
