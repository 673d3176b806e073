"""
jsonspan - find where a JSON-Pointer lives in the original JSON text.

jsonspan re-walks a raw JSON document and reports the character range
occupied by the value a JSON-Pointer addresses, without building a parsed
value tree. Useful for source-accurate error highlighting, partial extraction
and diff tooling.

Quick Start:
    import jsonspan

    text = '{"a": {"b": [1, 2, 3]}}'
    span = jsonspan.locate(text, "/a/b/1")
    text[span.start:span.end]               # '2'

    jsonspan.find_span(text, "/missing")     # None (locate() gives Span(0, 0))
    jsonspan.extract(text, ["a", "b"])       # '[1, 2, 3]'
"""

from .core.pointer import PointerPath, compile_pointer, parse_pointer
from .core.span import Span
from .locator import extract, find_span, locate, validate_document
from .security.exceptions import (
    InvalidDocumentError,
    InvalidPointerError,
    JsonSpanError,
    OutOfRangeError,
    ParseError,
    SecurityError,
    TrackerStateError,
    UnexpectedTokenError,
)
from .utils.config import ErrorReporting, ScanConfig, ScanLimits

__version__ = "0.1.0"
__author__ = "jsonspan contributors"

__all__ = [
    # Entry points
    "locate", "find_span", "extract", "validate_document",
    # Paths and spans
    "Span", "PointerPath", "parse_pointer", "compile_pointer",
    # Configuration classes
    "ScanConfig", "ScanLimits", "ErrorReporting",
    # Exception classes
    "JsonSpanError", "ParseError", "InvalidDocumentError", "UnexpectedTokenError",
    "OutOfRangeError", "InvalidPointerError", "TrackerStateError", "SecurityError",
]
