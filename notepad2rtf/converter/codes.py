"""
Byte values of the Notepad word processor format and the RTF control words
they are translated into.
"""

# Notepad control bytes
ESCAPE = 0x05  # next byte is a format code
LINE_FEED = 0x0A
CARRIAGE_RETURN = 0x0D
END_OF_DOCUMENT = 0x1A
SOFT_CARRIAGE_RETURN = 0x8A  # follows a hard line break
FILLER = 0xFF

DROPPED_BYTES = frozenset(
    {CARRIAGE_RETURN, END_OF_DOCUMENT, SOFT_CARRIAGE_RETURN, FILLER}
)

# Paired format codes, toggled on and off by successive occurrences
BOLD = 0xE2
ITALIC = 0xE9
UNDERLINE = 0xF5
SUBSCRIPT = 0xF3
SUPERSCRIPT = 0xF4
ENLARGED = 0xEC

# Non-paired format codes
SOFT_SPACE = 0x90

PAIRED_CODE_ATTRIBUTES = {
    BOLD: "bold",
    ITALIC: "italic",
    UNDERLINE: "underline",
    SUBSCRIPT: "subscript",
    SUPERSCRIPT: "superscript",
    ENLARGED: "enlarged",
}

# Characters with a special meaning in RTF
RTF_RESERVED = frozenset(b"{}\\")

# RTF vocabulary. The default font is Times New Roman 12pt, enlarged text is 14pt.
# the font table entry carries the family (\froman) instead of a size, sizes are set by \fs24 in RTF_TEXT_START
RTF_DOCUMENT_START = b"{\\rtf1\\ansi{\\fonttbl{\\f0\\froman Times New Roman;}}\n"
RTF_TEXT_START = b"\\pard\\plain\\fs24 "
RTF_PARAGRAPH = b"\\par\\fs24 "
RTF_DOCUMENT_END = b"}"

RTF_PLAIN = "\\plain"
RTF_NORMAL_SIZE = "\\fs24 "
RTF_LARGE_SIZE = "\\fs28 "

# Order matters, it is the order the control words appear in a fragment
RTF_ATTRIBUTE_WORDS = (
    ("bold", "\\b"),
    ("italic", "\\i"),
    ("underline", "\\ul"),
    ("subscript", "\\dn"),
    ("superscript", "\\up"),
)

TEXT_LINE_FEED = b"\n"
