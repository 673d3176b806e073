"""
Test cases for jsonspan exceptions and error reporting.

Tests focus on error context creation, message formatting, and error reporting accuracy.
"""

import unittest

from jsonspan.core.position import Position
from jsonspan.security.exceptions import (
    ErrorContext,
    ErrorReporter,
    ErrorSuggestionEngine,
    InvalidDocumentError,
    InvalidPointerError,
    JsonSpanError,
    OutOfRangeError,
    ParseError,
    SecurityError,
    TrackerStateError,
    UnexpectedTokenError,
)


class TestJsonSpanError(unittest.TestCase):
    """Test base JsonSpanError exception class."""

    def test_basic_error_creation(self):
        """Test basic error creation with message only."""
        error = JsonSpanError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertIsNone(error.context)
        self.assertIsNone(error.offset)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        """Test error creation with position information."""
        error = JsonSpanError("Parse error", position=Position(line=3, column=15))
        self.assertIn("Parse error at line 3, column 15", str(error))

    def test_error_with_suggestions(self):
        """Test error creation with suggestions."""
        suggestions = ["Check for missing quotes", "Verify JSON syntax"]
        error = JsonSpanError("Syntax error", suggestions=suggestions)

        error_str = str(error)
        self.assertIn("Suggestions:", error_str)
        self.assertIn("  - Check for missing quotes", error_str)
        self.assertIn("  - Verify JSON syntax", error_str)

    def test_error_with_context(self):
        """Test error creation with full context."""
        position = Position(line=1, column=9)
        context = ErrorContext(
            text='{"key": value}',
            position=position,
            context_before='{"key": ',
            context_after="value}",
            error_char="v",
            line_text='{"key": value}',
            column_indicator="        ^",
        )
        error = JsonSpanError("Unquoted value", position=position, context=context)

        lines = str(error).split("\n")
        self.assertEqual(lines[0], "Unquoted value at line 1, column 9")
        self.assertEqual(lines[1], 'Context: {"key": value}')
        self.assertEqual(lines[2], " " * 17 + "^")


class TestErrorTaxonomy(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_parse_errors(self):
        for error_class in (InvalidDocumentError, OutOfRangeError):
            with self.subTest(error_class=error_class):
                error = error_class("failure")
                self.assertIsInstance(error, ParseError)
                self.assertIsInstance(error, JsonSpanError)

    def test_out_of_range_is_index_error(self):
        self.assertIsInstance(OutOfRangeError("Over text max index."), IndexError)

    def test_pointer_and_tracker_errors(self):
        self.assertIsInstance(InvalidPointerError("bad"), ValueError)
        self.assertIsInstance(TrackerStateError("bad"), RuntimeError)
        self.assertIsInstance(SecurityError("bad"), JsonSpanError)

    def test_unexpected_token_message(self):
        error = UnexpectedTokenError("q", 12)
        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.char, "q")
        self.assertEqual(error.offset, 12)
        self.assertEqual(error.message, "Unexpected token q in JSON at position 12.")


class TestErrorReporter(unittest.TestCase):
    """Test ErrorReporter functionality."""

    def setUp(self):
        """Set up test ErrorReporter."""
        self.test_text = '{"key": "value", "number": 123}'
        self.reporter = ErrorReporter(self.test_text)

    def test_error_reporter_creation(self):
        self.assertEqual(self.reporter.text, self.test_text)
        self.assertEqual(self.reporter.lines, [self.test_text])

    def test_position_of(self):
        reporter = ErrorReporter('{\n  "a": 1\n}')
        self.assertEqual(reporter.position_of(0), Position(1, 1))
        self.assertEqual(reporter.position_of(4), Position(2, 3))
        self.assertEqual(reporter.position_of(11), Position(3, 1))

    def test_create_parse_error(self):
        error = self.reporter.create_parse_error("Test parse error", 9, ["Check syntax"])

        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.message, "Test parse error")
        self.assertEqual(error.offset, 9)
        self.assertEqual(error.position, Position(1, 10))
        self.assertEqual(error.suggestions, ["Check syntax"])
        self.assertEqual(error.context.text, self.test_text)
        self.assertEqual(error.context.error_char, "v")

    def test_create_parse_error_subclass(self):
        error = self.reporter.create_parse_error(
            "Parse JSON error.", 0, error_class=InvalidDocumentError
        )
        self.assertIsInstance(error, InvalidDocumentError)

    def test_context_can_be_disabled(self):
        reporter = ErrorReporter(self.test_text, include_context=False)
        error = reporter.create_parse_error("No context", 3)
        self.assertIsNone(error.context)
        self.assertIsNotNone(error.position)

    def test_create_unexpected_token(self):
        error = self.reporter.create_unexpected_token("z", 10)
        self.assertIsInstance(error, UnexpectedTokenError)
        self.assertEqual(error.position, Position(1, 11))
        self.assertTrue(error.suggestions)

    def test_create_security_error(self):
        error = self.reporter.create_security_error("Security issue", 8)
        self.assertIsInstance(error, SecurityError)
        self.assertEqual(error.message, "Security issue")
        self.assertEqual(error.offset, 8)
        self.assertEqual(error.position, Position(1, 9))
        self.assertEqual(error.context.error_char, '"')
        self.assertIn("at line 1, column 9", str(error))

    def test_context_window_is_bounded(self):
        text = "[" + "1," * 100 + "1]"
        reporter = ErrorReporter(text, context_length=10)
        context = reporter.build_context(reporter.position_of(100))
        self.assertEqual(len(context.line_text), 10)
        self.assertEqual(context.column_indicator, "     ^")

    def test_edge_position_handling(self):
        """Positions at or beyond the end are clamped."""
        end = self.reporter.create_parse_error("End of input", len(self.test_text))
        self.assertEqual(end.context.error_char, "")

        beyond = self.reporter.create_parse_error("Beyond text", 1000)
        self.assertEqual(beyond.position, Position(1, len(self.test_text) + 1))


class TestErrorSuggestionEngine(unittest.TestCase):
    """Test ErrorSuggestionEngine functionality."""

    def test_suggest_for_invalid_escape(self):
        suggestions = ErrorSuggestionEngine.suggest_for_invalid_escape("x")
        self.assertTrue(any("\\x" in s for s in suggestions))

        unicode_suggestions = ErrorSuggestionEngine.suggest_for_invalid_escape(
            "g", in_unicode=True
        )
        self.assertTrue(any("four hex digits" in s for s in unicode_suggestions))

    def test_suggest_for_truncated_input(self):
        self.assertTrue(
            any("}" in s for s in ErrorSuggestionEngine.suggest_for_truncated_input("object"))
        )
        self.assertTrue(
            any("]" in s for s in ErrorSuggestionEngine.suggest_for_truncated_input("array"))
        )
        self.assertEqual(len(ErrorSuggestionEngine.suggest_for_truncated_input(None)), 1)


if __name__ == '__main__':
    unittest.main()
