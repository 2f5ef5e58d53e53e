"""
Notepad document transcoder.

Reads a Notepad word processor document in a single forward pass and writes
it as RTF or plain text. Ordinary characters are copied through unchanged,
control bytes are dropped or translated, and escape sequences are handed to
the format code interpreter.
"""

import logging
from typing import BinaryIO, Iterator

from notepad2rtf.converter.codes import (
    DROPPED_BYTES,
    ESCAPE,
    LINE_FEED,
    RTF_DOCUMENT_END,
    RTF_DOCUMENT_START,
    RTF_PARAGRAPH,
    RTF_RESERVED,
    RTF_TEXT_START,
    TEXT_LINE_FEED,
)
from notepad2rtf.converter.data_types import (
    DEFAULT_CONVERSION_OPTIONS,
    ConversionOptions,
    ConversionReport,
    UnrecognizedCodeEvent,
)
from notepad2rtf.converter.format_codes import FormatState, apply_format_code
from notepad2rtf.converter.util.trailing_writer import TrailingTrimWriter
from notepad2rtf.exceptions import UnrecognizedFormatCodeError

logger = logging.getLogger(__name__)


class Transcoder:
    """Converts one Notepad document. Create a new instance for every run."""

    def __init__(self, options: ConversionOptions = DEFAULT_CONVERSION_OPTIONS):
        self.options = options
        self.state = FormatState()
        self.position = 0
        self._last_fragment = ""
        self._report = ConversionReport(mode=options.mode)
        self._used = False

    def run(self, source: BinaryIO, sink: BinaryIO) -> ConversionReport:
        """
        Convert everything readable from ``source`` and write it to ``sink``.

        Both streams stay open; the caller owns them.
        """
        if self._used:
            raise RuntimeError("Transcoder instances convert a single document")
        self._used = True

        text_only = self.options.text_only
        writer = TrailingTrimWriter(
            sink, hold=0 if text_only else self.options.trailing_trim
        )
        if not text_only:
            writer.write(RTF_DOCUMENT_START)
            writer.write(RTF_TEXT_START)

        stream = self._iter_bytes(source)
        for byte in stream:
            if byte == ESCAPE:
                self._handle_escape(stream, writer)
            elif byte == LINE_FEED:
                writer.write(TEXT_LINE_FEED if text_only else RTF_PARAGRAPH)
            elif byte in DROPPED_BYTES:
                continue
            elif byte in RTF_RESERVED:
                if not text_only:
                    writer.write(b"\\" + bytes((byte,)))
            else:
                writer.write(bytes((byte,)))

        self._report.bytes_read = self.position
        self._report.bytes_written = writer.finish(
            b"" if text_only else RTF_DOCUMENT_END
        )
        logger.debug(
            f"Converted {self._report.bytes_read} bytes into "
            f"{self._report.bytes_written} bytes ({self.options.mode})"
        )
        return self._report

    def _iter_bytes(self, source: BinaryIO) -> Iterator[int]:
        # the counter moves before the byte is handed out, so a consumer sees
        # the offset of the current byte as position - 1
        while True:
            chunk = source.read(self.options.chunk_size)
            if not chunk:
                return
            for byte in chunk:
                self.position += 1
                yield byte

    def _handle_escape(self, stream: Iterator[int], writer: TrailingTrimWriter) -> None:
        code = next(stream, None)
        if code is None:
            logger.warning(
                f"Truncated escape sequence at byte {self.position - 1}, "
                "output may be corrupted"
            )
            return
        if self.options.text_only:
            return

        try:
            fragment = apply_format_code(self.state, code)
        except UnrecognizedFormatCodeError as exc:
            position = self.position - 1
            logger.warning(
                f"Unknown format code 0x{exc.code:02X} at byte {position}, "
                "output may be corrupted"
            )
            self._report.unrecognized_codes.append(
                UnrecognizedCodeEvent(code=exc.code, position=position)
            )
            if self.options.reemit_stale_fragment:
                writer.write(self._last_fragment.encode("ascii"))
            return

        self._report.format_codes += 1
        if fragment:
            # soft spaces do not replace the last generated fragment
            self._last_fragment = fragment
            writer.write(fragment.encode("ascii"))


def convert(
    source: BinaryIO,
    sink: BinaryIO,
    options: ConversionOptions | None = None,
) -> ConversionReport:
    """
    Convert a Notepad document stream.

    Args:
        source: Readable binary stream positioned at the start of the document.
        sink: Writable binary stream receiving the RTF or text output.
        options: Run settings, RTF output by default.

    Returns:
        ConversionReport describing the run.
    """
    return Transcoder(options or DEFAULT_CONVERSION_OPTIONS).run(source, sink)
