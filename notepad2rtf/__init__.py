"""
notepad2rtf: converter for Amstrad Notepad word processor documents.

Turns the 8-bit documents written by the Notepad word processor, with their
embedded bold, italic, underline, sub/superscript and enlarged-text codes,
into Rich Text Format or plain text.
"""

import io
import logging
from pathlib import Path

from notepad2rtf.converter.data_types import (
    DEFAULT_CONVERSION_OPTIONS,
    OUTPUT_MODE_RTF,
    OUTPUT_MODE_TEXT,
    ConversionOptions,
    ConversionReport,
)
from notepad2rtf.converter.transcoder import convert
from notepad2rtf.exceptions import (
    ConversionInputError,
    ConversionOutputError,
    UnrecognizedFormatCodeError,
)
from notepad2rtf.naming import derive_output_path

__version__ = "1.2.0"

logger = logging.getLogger(__name__)


def convert_bytes(data: bytes, options: ConversionOptions | None = None) -> bytes:
    """Convert an in-memory Notepad document and return the converted bytes."""
    sink = io.BytesIO()
    convert(io.BytesIO(data), sink, options)
    return sink.getvalue()


def convert_file(
    path: str | Path,
    output_path: str | Path | None = None,
    options: ConversionOptions | None = None,
) -> ConversionReport:
    """
    Convert a Notepad document on disk.

    Args:
        path: Path of the Notepad document.
        output_path: Where to write the result. Defaults to the input path with
            its extension replaced by ``.rtf`` or ``.txt``.
        options: Run settings, RTF output by default.

    Returns:
        ConversionReport with the source and target file metadata populated.

    Raises:
        ConversionInputError: The document cannot be opened.
        ConversionOutputError: The output file cannot be opened or is the input file.

    Example:
        >>> import notepad2rtf
        >>> report = notepad2rtf.convert_file("letter.np")
        >>> report.metadata.target.filename
        'letter.rtf'
    """
    options = options or DEFAULT_CONVERSION_OPTIONS
    path = Path(path)
    if output_path is None:
        output_path = derive_output_path(path, options.mode)
    output_path = Path(output_path)

    try:
        source = open(path, "rb")
    except OSError as exc:
        raise ConversionInputError(str(path), cause=exc) from exc

    with source:
        if output_path.exists() and output_path.samefile(path):
            raise ConversionOutputError(
                str(output_path), f"Output file is the input file: {output_path}"
            )
        try:
            sink = open(output_path, "wb")
        except OSError as exc:
            raise ConversionOutputError(str(output_path), cause=exc) from exc
        with sink:
            logger.debug(f"Converting [{path}] to [{output_path}]")
            report = convert(source, sink, options)

    report.metadata.source.populate_from_path(path)
    report.metadata.target.populate_from_path(output_path)
    return report


__all__ = [
    # Version
    "__version__",
    # Main functions
    "convert",
    "convert_bytes",
    "convert_file",
    "derive_output_path",
    # Settings and results
    "ConversionOptions",
    "ConversionReport",
    "DEFAULT_CONVERSION_OPTIONS",
    "OUTPUT_MODE_RTF",
    "OUTPUT_MODE_TEXT",
    # Errors
    "ConversionInputError",
    "ConversionOutputError",
    "UnrecognizedFormatCodeError",
]
