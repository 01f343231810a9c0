import argparse
import sys
from typing import Iterable, Optional, TextIO

from midistream.dump_app import (
    DumpSettings,
    InvalidHexInputError,
    create_logger,
    format_message,
    get_settings,
    parse_hex_bytes,
)
from midistream.parsing.messages.kinds import REALTIME_KINDS
from midistream.parsing.stream import MidiParser


class MidiDump:
    def __init__(self, settings: DumpSettings, log_stream: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.logger = create_logger(
            "midistream.dump", settings.log_ring_size, settings.log_level, stream=log_stream
        )
        self.parser = MidiParser()

    def run(self, chunks: Iterable[str], out: TextIO) -> int:
        """Decode each hex chunk as it arrives and write its messages before reading the next one."""
        self.logger.info("dump_started", extra={"details": {"format": self.settings.output_format}})
        total_bytes = decoded = printed = 0
        for chunk in chunks:
            data = parse_hex_bytes([chunk])
            total_bytes += len(data)
            decoded += self.parser.feed(data)
            printed += self._write_pending(out)
            out.flush()
        self.logger.info(
            "dump_finished",
            extra={"details": {"bytes": total_bytes, "messages": decoded, "printed": printed}},
        )
        return decoded

    def _write_pending(self, out: TextIO) -> int:
        printed = 0
        for message in self.parser:
            self.logger.debug("message_decoded", extra={"details": message.as_dict()})
            if message.kind in REALTIME_KINDS and not self.settings.show_realtime:
                continue
            out.write(format_message(message, self.settings.output_format) + "\n")
            printed += 1
        return printed


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Decode hex-encoded MIDI 1.0 bytes and print the messages.")
    parser.add_argument("hex", nargs="*", help="Hex bytes, e.g. '90 3c 64'. Reads stdin line by line when omitted.")
    parser.add_argument("--format", choices=["text", "json"], default=None, help="Output format.")
    parser.add_argument("--no-realtime", action="store_true", help="Hide system real-time messages.")
    parser.add_argument("--log-level", type=str, default=None, help="Log level for messages written to stderr.")

    args = parser.parse_args(argv)
    overrides = {}
    if args.format:
        overrides["output_format"] = args.format
    if args.no_realtime:
        overrides["show_realtime"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = DumpSettings(**overrides) if overrides else get_settings()

    chunks = args.hex or sys.stdin
    try:
        MidiDump(settings, log_stream=sys.stderr).run(chunks, sys.stdout)
    except InvalidHexInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
