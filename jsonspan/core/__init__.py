"""
jsonspan Core Scanning Engine.

This module provides the cursor, span tracking, path matching and the
recursive-descent scanner.
"""

from .cursor import Cursor
from .pointer import PointerPath
from .position import Position
from .scanner import Scanner
from .span import ParseResult, Span, SpanTracker, TrackedSpan

__all__ = [
    'Cursor', 'Position',
    'Span', 'SpanTracker', 'TrackedSpan', 'ParseResult',
    'PointerPath', 'Scanner',
]
