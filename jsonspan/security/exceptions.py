"""
Exception hierarchy and error reporting for jsonspan.

Every error raised while locating a span is fatal to the current call. Errors
carry the absolute character offset in the source text and, when an
ErrorReporter is involved, a line/column position plus a context snippet that
callers can use for diagnostics.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.position import Position, offset_to_position


@dataclass
class ErrorContext:
    """Source context surrounding an error offset."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonSpanError(Exception):
    """Base class for all jsonspan errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        offset: Optional[int] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        self.offset = offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = self.message

        if self.position:
            message += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            message += f"\nContext: {self.context.line_text}"
            message += f"\n         {self.context.column_indicator}"

        if self.suggestions:
            message += "\nSuggestions:"
            for suggestion in self.suggestions:
                message += f"\n  - {suggestion}"

        return message


class ParseError(JsonSpanError):
    """Raised when the document cannot be scanned."""


class InvalidDocumentError(ParseError):
    """The document is not valid JSON or is not an object/array at top level."""


class UnexpectedTokenError(ParseError):
    """An unrecognized character was found inside an escape sequence."""

    def __init__(
        self,
        char: str,
        offset: int,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.char = char
        super().__init__(
            f"Unexpected token {char} in JSON at position {offset}.",
            position=position,
            context=context,
            suggestions=suggestions,
            offset=offset,
        )


class OutOfRangeError(ParseError, IndexError):
    """The cursor was asked to read or walk past the end of the text."""


class InvalidPointerError(JsonSpanError, ValueError):
    """A JSON-Pointer string is malformed."""


class TrackerStateError(JsonSpanError, RuntimeError):
    """A SpanTracker was started or finished out of order."""


class SecurityError(JsonSpanError):
    """Raised when input exceeds a configured scanning limit."""


class ErrorReporter:
    """Builds positioned, contextual errors for one source text."""

    def __init__(self, text: str, context_length: int = 50, include_context: bool = True):
        self.text = text
        self.lines = text.split("\n")
        self.context_length = context_length
        self.include_context = include_context

    def position_of(self, offset: int) -> Position:
        """Translate an absolute offset into a 1-based line/column."""
        return offset_to_position(self.text, offset)

    def build_context(self, position: Position) -> ErrorContext:
        """Build the context snippet for a line/column position."""
        line_index = max(0, min(position.line - 1, len(self.lines) - 1))
        line_text = self.lines[line_index]
        column = max(0, min(position.column - 1, len(line_text)))

        half = self.context_length // 2
        start = max(0, column - half)
        end = min(len(line_text), column + half)

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=line_text[start:column],
            context_after=line_text[column:end],
            error_char=line_text[column] if column < len(line_text) else "",
            line_text=line_text[start:end],
            column_indicator=" " * (column - start) + "^",
        )

    def create_parse_error(
        self,
        message: str,
        offset: int,
        suggestions: Optional[list[str]] = None,
        error_class: type = ParseError,
    ) -> ParseError:
        """Create a ParseError (or subclass) positioned at ``offset``."""
        position = self.position_of(offset)
        context = self.build_context(position) if self.include_context else None
        return error_class(
            message,
            position=position,
            context=context,
            suggestions=suggestions,
            offset=offset,
        )

    def create_unexpected_token(
        self, char: str, offset: int, in_unicode: bool = False
    ) -> UnexpectedTokenError:
        """Create the error for an invalid escape character at ``offset``."""
        position = self.position_of(offset)
        return UnexpectedTokenError(
            char,
            offset,
            position=position,
            context=self.build_context(position) if self.include_context else None,
            suggestions=ErrorSuggestionEngine.suggest_for_invalid_escape(
                char, in_unicode
            ),
        )

    def create_security_error(self, message: str, offset: int) -> SecurityError:
        """Create a SecurityError positioned at ``offset``."""
        position = self.position_of(offset)
        return SecurityError(
            message,
            position=position,
            context=self.build_context(position) if self.include_context else None,
            offset=offset,
        )


class ErrorSuggestionEngine:
    """Suggests fixes for common scanning failures."""

    @staticmethod
    def suggest_for_invalid_escape(char: str, in_unicode: bool = False) -> list[str]:
        """Suggestions for an unknown escape character."""
        if in_unicode:
            return [
                "Unicode escapes need exactly four hex digits (\\uXXXX)",
                f"'{char}' is not a hexadecimal digit",
            ]
        return [
            'Valid escapes are \\b \\f \\n \\r \\t \\" \\/ \\\\ and \\uXXXX',
            f"Escape the backslash itself if '\\{char}' is literal text",
        ]

    @staticmethod
    def suggest_for_truncated_input(structure: Optional[str]) -> list[str]:
        """Suggestions when the scan runs off the end of the text."""
        closing = {"object": "}", "array": "]", "string": '"'}.get(structure or "")
        if closing is None:
            return ["Check that every opened structure is closed"]
        return [
            f"Add missing closing '{closing}' for the {structure}",
            "Check for mismatched brackets earlier in the document",
        ]
