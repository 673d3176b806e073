"""
Common constants used by the jsonspan scanner.
"""

# Single-character JSON escapes and the literal they stand for
ESCAPED_CHARS = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "/": "/",
    "\\": "\\",
}

UNICODE_ESCAPE = "u"
UNICODE_ESCAPE_LENGTH = 4
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

QUOTE = '"'
BACKSLASH = "\\"
OBJECT_START = "{"
OBJECT_END = "}"
ARRAY_START = "["
ARRAY_END = "]"
KEY_SEPARATOR = ":"
VALUE_SEPARATOR = ","

# A bare literal (number, true, false, null) ends at one of these
LITERAL_TERMINATORS = frozenset((OBJECT_END, ARRAY_END, VALUE_SEPARATOR))

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def is_whitespace(char: str) -> bool:
    """Whether ``char`` is a whitespace character."""
    return char.isspace()
