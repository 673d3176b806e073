"""
Recursive-descent scanner that re-walks JSON text and finds the span of the
value addressed by a PointerPath.

The scanner never builds values. Each parse unit reports its verbatim source
text and offsets, and the span of the addressed value is handed back up the
call chain through ``ParseResult.match``.
"""

import logging
from typing import NoReturn, Optional

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    OutOfRangeError,
    SecurityError,
    UnexpectedTokenError,
)
from ..security.limits import LimitValidator
from .constants import (
    ARRAY_END,
    ARRAY_START,
    BACKSLASH,
    ESCAPED_CHARS,
    HEX_DIGITS,
    HIGH_SURROGATES,
    KEY_SEPARATOR,
    LITERAL_TERMINATORS,
    LOW_SURROGATES,
    OBJECT_END,
    OBJECT_START,
    QUOTE,
    UNICODE_ESCAPE,
    UNICODE_ESCAPE_LENGTH,
    VALUE_SEPARATOR,
    is_whitespace,
)
from .cursor import Cursor
from .pointer import PointerPath
from .span import ParseResult, Span, SpanTracker

logger = logging.getLogger(__name__)


class Scanner:
    """Parser context: the cursor, the path being matched and error helpers."""

    def __init__(
        self,
        text: str,
        pointer: PointerPath,
        validator: Optional[LimitValidator] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.cursor = Cursor(text)
        self.pointer = pointer
        self.validator = validator
        self.error_reporter = error_reporter
        # Innermost construct still open, for truncation diagnostics
        self._open_structures: list[str] = []

    def scan(self) -> Optional[Span]:
        """Scan the first top-level value and return the matched span, if any."""
        self.cursor.skip_whitespace()
        try:
            result = self.parse_value(0)
        except OutOfRangeError as exc:
            self._raise_truncated(exc)

        logger.debug(
            f"Scan finished at offset {self.cursor.pos}, "
            f"{self.pointer.matched_count}/{len(self.pointer)} segments matched"
        )
        return result.match

    def parse_value(self, depth: int) -> ParseResult:
        """Dispatch on the lookahead character and scan one value."""
        tracker = SpanTracker(self.cursor)
        tracker.start()

        char = self.cursor.peek()
        match: Optional[Span] = None

        if char == QUOTE:
            self.parse_string()
        elif char == ARRAY_START:
            match = self.parse_array(depth).match
        elif char == OBJECT_START:
            match = self.parse_object(depth).match
        else:
            self.parse_literal()

        start, end, value = tracker.finish()
        return ParseResult(value, start, end, match)

    def parse_literal(self) -> ParseResult:
        """
        Consume a number, ``true``, ``false`` or ``null`` verbatim.

        The literal ends at whitespace or one of ``}``, ``]`` and ``,``; its
        format is not checked.
        """
        tracker = SpanTracker(self.cursor)
        tracker.start()

        self.cursor.advance()
        while True:
            char = self.cursor.peek()
            if is_whitespace(char) or char in LITERAL_TERMINATORS:
                break
            self.cursor.advance()

        start, end, value = tracker.finish()
        return ParseResult(value, start, end)

    def parse_string(self) -> ParseResult:
        """Scan a quoted string; the result value keeps escapes undecoded."""
        result, _ = self._parse_quoted()
        return result

    def parse_string_body(self) -> str:
        """
        Decode string content up to, but not including, the closing quote.
        """
        chunks = []

        while True:
            char = self.cursor.peek()
            if char == QUOTE:
                break
            if char == BACKSLASH:
                chunks.append(self.parse_escape())
            else:
                chunks.append(char)
                self.cursor.advance()

        return "".join(chunks)

    def parse_escape(self) -> str:
        """Decode one escape sequence; the cursor starts on the backslash."""
        self.cursor.advance()
        char = self.cursor.peek()

        if char in ESCAPED_CHARS:
            decoded = ESCAPED_CHARS[char]
        elif char == UNICODE_ESCAPE:
            decoded = self._decode_unicode_escape()
        else:
            self._raise_unexpected_token(char, self.cursor.pos)

        self.cursor.advance()
        return decoded

    def parse_object(self, depth: int) -> ParseResult:
        """Scan an object; keys at ``depth`` are checked against the path."""
        tracker = SpanTracker(self.cursor)
        tracker.start()
        self._enter_structure("object")

        match: Optional[Span] = None
        self.cursor.advance()

        while True:
            char = self.cursor.peek()
            if char == OBJECT_END:
                self.cursor.advance()
                break
            if char == QUOTE:
                pair = self.parse_key_value_pair(depth)
                if pair.match is not None:
                    match = pair.match
            else:
                # Whitespace and commas between members
                self.cursor.advance()

        self._exit_structure()
        start, end, value = tracker.finish()
        return ParseResult(value, start, end, match)

    def parse_key_value_pair(self, depth: int) -> ParseResult:
        """Scan ``"key": value``; a terminal key match yields the value's span."""
        tracker = SpanTracker(self.cursor)
        tracker.start()

        _, key = self._parse_quoted()

        is_target = self._check_pointer(depth, key)

        while True:
            char = self.cursor.peek()
            self.cursor.advance()
            if char == KEY_SEPARATOR:
                break

        self.cursor.skip_whitespace()
        value = self.parse_value(depth + 1)

        start, end, text = tracker.finish()
        match = value.span if is_target else value.match
        return ParseResult(text, start, end, match)

    def parse_array(self, depth: int) -> ParseResult:
        """Scan an array; element indexes at ``depth`` are checked against the path."""
        tracker = SpanTracker(self.cursor)
        tracker.start()
        self._enter_structure("array")

        match: Optional[Span] = None
        index = -1
        self.cursor.advance()

        while True:
            char = self.cursor.peek()
            if char == ARRAY_END:
                self.cursor.advance()
                break
            if char == VALUE_SEPARATOR or is_whitespace(char):
                self.cursor.advance()
                continue

            index += 1
            is_target = self._check_pointer(depth, str(index))
            element = self.parse_value(depth + 1)
            if is_target:
                match = element.span
            elif element.match is not None:
                match = element.match

        self._exit_structure()
        start, end, value = tracker.finish()
        return ParseResult(value, start, end, match)

    def _parse_quoted(self) -> tuple[ParseResult, str]:
        tracker = SpanTracker(self.cursor)
        tracker.start()
        self._open_structures.append("string")

        self.cursor.advance()
        decoded = self.parse_string_body()
        self.cursor.advance()

        self._open_structures.pop()
        start, end, value = tracker.finish()
        return ParseResult(value, start, end), decoded

    def _decode_unicode_escape(self) -> str:
        """Decode ``uXXXX`` with the cursor on the ``u``; stops on the last digit."""
        code_point = self._read_hex_quad()

        if code_point in HIGH_SURROGATES:
            low = self._peek_low_surrogate()
            if low is not None:
                self.cursor.advance(2)
                self._read_hex_quad()
                code_point = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)

        return chr(code_point)

    def _read_hex_quad(self) -> int:
        digits = []

        def visit(char: str, pos: int) -> None:
            if char not in HEX_DIGITS:
                self._raise_unexpected_token(char, pos, in_unicode=True)
            digits.append(char.lower())

        self.cursor.walk(UNICODE_ESCAPE_LENGTH, visit)
        return int("".join(digits), 16)

    def _peek_low_surrogate(self) -> Optional[int]:
        """Code point of a ``\\uDC00``-``\\uDFFF`` escape right after the cursor."""
        start = self.cursor.pos + 1
        candidate = self.cursor.text[start : start + 2 + UNICODE_ESCAPE_LENGTH]
        if len(candidate) != 2 + UNICODE_ESCAPE_LENGTH:
            return None
        if candidate[:2] != BACKSLASH + UNICODE_ESCAPE:
            return None
        digits = candidate[2:]
        if not all(digit in HEX_DIGITS for digit in digits):
            return None
        code_point = int(digits, 16)
        return code_point if code_point in LOW_SURROGATES else None

    def _check_pointer(self, depth: int, key: str) -> bool:
        """Advance the path on a match; True when the match was the last segment."""
        if not self.pointer.matches(depth, key):
            return False

        is_target = self.pointer.is_last_segment()
        self.pointer.advance()
        logger.debug(
            f"Matched segment {key!r} at depth {depth} "
            f"(offset {self.cursor.pos}, terminal={is_target})"
        )
        return is_target

    def _enter_structure(self, structure: str) -> None:
        if self.validator:
            try:
                self.validator.enter_structure(self.cursor.pos)
            except SecurityError as exc:
                if self.error_reporter is None:
                    raise
                raise self.error_reporter.create_security_error(
                    exc.message, self.cursor.pos
                ) from exc
        self._open_structures.append(structure)

    def _exit_structure(self) -> None:
        if self.validator:
            self.validator.exit_structure()
        self._open_structures.pop()

    def _raise_unexpected_token(
        self, char: str, offset: int, in_unicode: bool = False
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_unexpected_token(char, offset, in_unicode)
        raise UnexpectedTokenError(
            char,
            offset,
            suggestions=ErrorSuggestionEngine.suggest_for_invalid_escape(
                char, in_unicode
            ),
        )

    def _raise_truncated(self, exc: OutOfRangeError) -> NoReturn:
        structure = self._open_structures[-1] if self._open_structures else None
        suggestions = ErrorSuggestionEngine.suggest_for_truncated_input(structure)
        offset = exc.offset if exc.offset is not None else self.cursor.pos

        if self.error_reporter:
            raise self.error_reporter.create_parse_error(
                exc.message, offset, suggestions, error_class=OutOfRangeError
            ) from exc
        raise OutOfRangeError(
            exc.message, suggestions=suggestions, offset=offset
        ) from exc
