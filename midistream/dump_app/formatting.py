from __future__ import annotations

import json
import re
from typing import Iterable

from midistream.parsing.messages.model import ControlChangeMessage, MidiMessage

_HEX_SEPARATORS = re.compile(r"[\s,:]+")


class InvalidHexInputError(ValueError):
    pass


def parse_hex_bytes(chunks: Iterable[str]) -> bytes:
    """
    Turn hex text into raw bytes.

    Bytes may be written packed (``"903c64"``) or separated by whitespace,
    commas or colons (``"90 3c 64"``, ``"90:3C:64"``). An optional ``0x``
    prefix on each byte is accepted.

    Args:
        chunks: Pieces of hex text, e.g. command-line arguments or lines.

    Returns:
        The decoded bytes, in order.

    Raises:
        InvalidHexInputError: If a piece is not valid hex.
    """
    buf = bytearray()
    for chunk in chunks:
        for token in _HEX_SEPARATORS.split(chunk.strip()):
            if not token:
                continue
            if token.lower().startswith("0x"):
                token = token[2:]
            if len(token) == 1:
                token = "0" + token
            try:
                buf.extend(bytes.fromhex(token))
            except ValueError as exc:
                raise InvalidHexInputError(f"Invalid hex input {token!r}: {exc}") from exc
    return bytes(buf)


def format_text(message: MidiMessage) -> str:
    parts = [message.kind.name.lower()]
    if message.channel is not None:
        # channels are shown 1-16, as on instrument panels
        parts.append(f"ch={message.channel + 1}")
    for name, value in message.payload().items():
        parts.append(f"{name}={value}")
    if isinstance(message, ControlChangeMessage):
        parts.append(f"({message.controller_name})")
    return " ".join(parts)


def format_json(message: MidiMessage) -> str:
    return json.dumps(message.as_dict(), sort_keys=True)


def format_message(message: MidiMessage, output_format: str = "text") -> str:
    if output_format == "json":
        return format_json(message)
    return format_text(message)
