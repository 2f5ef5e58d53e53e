from dataclasses import dataclass, field
from pathlib import Path
from typing import List

OUTPUT_MODE_RTF = "rtf"
OUTPUT_MODE_TEXT = "text"
OUTPUT_MODES = (OUTPUT_MODE_RTF, OUTPUT_MODE_TEXT)


@dataclass(frozen=True)
class ConversionOptions:
    """
    Settings for a single conversion run.

    The defaults produce RTF and drop the markup of unknown format codes.
    """

    mode: str = OUTPUT_MODE_RTF
    # re-emit the last fragment when a format code is not recognised
    reemit_stale_fragment: bool = False
    # number of trailing output bytes replaced by the closing brace in RTF mode
    trailing_trim: int = 2
    chunk_size: int = 64 * 1024

    def __post_init__(self) -> None:
        if self.mode not in OUTPUT_MODES:
            raise ValueError(f"Unknown output mode: {self.mode}")
        if self.trailing_trim < 0:
            raise ValueError("trailing_trim must not be negative")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be positive")

    @property
    def text_only(self) -> bool:
        return self.mode == OUTPUT_MODE_TEXT


DEFAULT_CONVERSION_OPTIONS = ConversionOptions()


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )


@dataclass
class UnrecognizedCodeEvent:
    code: int
    # 0-based offset of the code byte in the input
    position: int


@dataclass
class ConversionMetadata:
    source: FileMetadataInterface = field(default_factory=FileMetadataInterface)
    target: FileMetadataInterface = field(default_factory=FileMetadataInterface)


@dataclass
class ConversionReport:
    """Summary of a finished conversion run."""

    mode: str = OUTPUT_MODE_RTF
    bytes_read: int = 0
    bytes_written: int = 0
    # escape sequences with a recognised format code
    format_codes: int = 0
    unrecognized_codes: List[UnrecognizedCodeEvent] = field(default_factory=list)
    metadata: ConversionMetadata = field(default_factory=ConversionMetadata)

    @property
    def has_warnings(self) -> bool:
        return bool(self.unrecognized_codes)
