import logging
from pathlib import Path

from notepad2rtf.converter.data_types import OUTPUT_MODE_RTF, OUTPUT_MODE_TEXT

logger = logging.getLogger(__name__)

OUTPUT_EXTENSIONS = {
    OUTPUT_MODE_RTF: ".rtf",
    OUTPUT_MODE_TEXT: ".txt",
}


def derive_output_path(path: str | Path, mode: str = OUTPUT_MODE_RTF) -> Path:
    """
    Return the input path with its extension replaced by the one of the output mode.

    Raises:
        ValueError: The mode is unknown or the path names no file.
    """
    try:
        extension = OUTPUT_EXTENSIONS[mode]
    except KeyError:
        raise ValueError(f"Unknown output mode: {mode}") from None

    path = Path(path)
    if not path.name:
        raise ValueError(f"The path does not name a file [{path}]")
    output_path = path.with_suffix(extension)
    if output_path == path:
        # a file that already has the target extension would be overwritten
        output_path = path.with_name(path.name + extension)
    logger.debug(f"Output path for [{path}] in {mode} mode: {output_path}")
    return output_path
