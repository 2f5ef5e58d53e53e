from notepad2rtf.converter.data_types import (
    DEFAULT_CONVERSION_OPTIONS,
    OUTPUT_MODE_RTF,
    OUTPUT_MODE_TEXT,
    ConversionOptions,
    ConversionReport,
    UnrecognizedCodeEvent,
)
from notepad2rtf.converter.format_codes import (
    FormatState,
    apply_format_code,
    render_fragment,
)
from notepad2rtf.converter.transcoder import Transcoder, convert

__all__ = [
    "DEFAULT_CONVERSION_OPTIONS",
    "OUTPUT_MODE_RTF",
    "OUTPUT_MODE_TEXT",
    "ConversionOptions",
    "ConversionReport",
    "UnrecognizedCodeEvent",
    "FormatState",
    "apply_format_code",
    "render_fragment",
    "Transcoder",
    "convert",
]
