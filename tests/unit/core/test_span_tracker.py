"""
Test cases for spans and the one-shot span tracker.
"""

import unittest

from jsonspan.core.cursor import Cursor
from jsonspan.core.span import EMPTY_SPAN, ParseResult, Span, SpanTracker, TrackerState
from jsonspan.security.exceptions import TrackerStateError


class TestSpan(unittest.TestCase):
    """Test Span helpers."""

    def test_slice_and_length(self):
        text = '{"x":"hi"}'
        span = Span(5, 9)
        self.assertEqual(span.slice(text), '"hi"')
        self.assertEqual(span.length, 4)
        self.assertFalse(span.is_empty)

    def test_to_dict(self):
        self.assertEqual(Span(3, 7).to_dict(), {"from": 3, "to": 7})

    def test_empty_span(self):
        self.assertEqual(EMPTY_SPAN, Span(0, 0))
        self.assertTrue(EMPTY_SPAN.is_empty)

    def test_parse_result_span(self):
        result = ParseResult("[1]", 4, 7)
        self.assertEqual(result.span, Span(4, 7))
        self.assertIsNone(result.match)


class TestSpanTracker(unittest.TestCase):
    """Test the idle -> started -> finished lifecycle."""

    def setUp(self):
        self.cursor = Cursor('{"key": "value"}')

    def test_start_finish_records_substring(self):
        tracker = SpanTracker(self.cursor)
        self.cursor.advance(8)
        self.assertEqual(tracker.start(), 8)
        self.cursor.advance(7)
        tracked = tracker.finish()

        self.assertEqual(tracked.start, 8)
        self.assertEqual(tracked.end, 15)
        self.assertEqual(tracked.substring, '"value"')
        self.assertEqual(tracked.span, Span(8, 15))
        self.assertTrue(tracker.is_finished)

    def test_zero_width(self):
        tracker = SpanTracker(self.cursor)
        tracker.start()
        tracked = tracker.finish()
        self.assertEqual(tracked.substring, "")
        self.assertEqual(tracked.start, tracked.end)

    def test_state_transitions(self):
        tracker = SpanTracker(self.cursor)
        self.assertIs(tracker.state, TrackerState.IDLE)
        tracker.start()
        self.assertIs(tracker.state, TrackerState.STARTED)
        tracker.finish()
        self.assertIs(tracker.state, TrackerState.FINISHED)

    def test_double_start_fails(self):
        tracker = SpanTracker(self.cursor)
        tracker.start()
        with self.assertRaises(TrackerStateError):
            tracker.start()

    def test_finish_before_start_fails(self):
        tracker = SpanTracker(self.cursor)
        with self.assertRaises(TrackerStateError):
            tracker.finish()

    def test_no_reuse_after_finish(self):
        """A finished tracker can neither restart nor finish again."""
        tracker = SpanTracker(self.cursor)
        tracker.start()
        tracker.finish()
        with self.assertRaises(TrackerStateError):
            tracker.start()
        with self.assertRaises(TrackerStateError):
            tracker.finish()

    def test_misuse_is_runtime_error(self):
        with self.assertRaises(RuntimeError):
            SpanTracker(self.cursor).finish()


if __name__ == '__main__':
    unittest.main()
