"""
Format code interpreter.

Notepad marks text attributes with paired codes: the first occurrence of a
code switches the attribute on, the next one switches it off again. Every
recognised paired code produces an RTF fragment describing the complete
attribute set that applies to the text that follows.
"""

import logging
from dataclasses import dataclass

from notepad2rtf.converter.codes import (
    PAIRED_CODE_ATTRIBUTES,
    RTF_ATTRIBUTE_WORDS,
    RTF_LARGE_SIZE,
    RTF_NORMAL_SIZE,
    RTF_PLAIN,
    SOFT_SPACE,
)
from notepad2rtf.exceptions import UnrecognizedFormatCodeError

logger = logging.getLogger(__name__)


@dataclass
class FormatState:
    """Pending text attributes of one conversion run, all off initially."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    subscript: bool = False
    superscript: bool = False
    enlarged: bool = False

    def toggle(self, attribute: str) -> None:
        setattr(self, attribute, not getattr(self, attribute))


def render_fragment(state: FormatState) -> str:
    """Return the RTF control words for the attributes currently switched on."""
    parts = [RTF_PLAIN]
    for attribute, word in RTF_ATTRIBUTE_WORDS:
        if getattr(state, attribute):
            parts.append(word)
    parts.append(RTF_LARGE_SIZE if state.enlarged else RTF_NORMAL_SIZE)
    return "".join(parts)


def apply_format_code(state: FormatState, code: int) -> str:
    """
    Apply a format code to the state and return the RTF fragment to emit.

    Args:
        state: The attribute state of the current run, modified in place.
        code: The byte following the escape code.

    Returns:
        The fragment for a paired code, an empty string for a soft space.

    Raises:
        UnrecognizedFormatCodeError: The code is neither a paired code nor a soft space.
    """
    if code == SOFT_SPACE:
        return ""
    attribute = PAIRED_CODE_ATTRIBUTES.get(code)
    if attribute is None:
        raise UnrecognizedFormatCodeError(code)
    state.toggle(attribute)
    logger.debug(
        f"Format code 0x{code:02X}: {attribute} "
        f"{'on' if getattr(state, attribute) else 'off'}"
    )
    return render_fragment(state)
