"""
Line/column positions for diagnostics.
"""

from dataclasses import dataclass


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


def offset_to_position(text: str, offset: int) -> Position:
    """Translate an absolute character offset in ``text`` into a Position."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1)
