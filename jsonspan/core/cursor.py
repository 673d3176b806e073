"""
Character cursor over the immutable source text.

Direct reads (``peek``) fail when they land outside the text, while bulk
movement (``advance``/``retreat``) tolerates stepping onto the end and reports
it by returning ``None``. Callers peek when a character is structurally
guaranteed to exist and step when probing toward a possible end.
"""

from typing import Callable, Optional

from ..security.exceptions import OutOfRangeError
from .constants import is_whitespace
from .position import Position, offset_to_position

Visitor = Callable[[str, int], Optional[bool]]


class Cursor:
    """Position tracker the scanner reads the text through."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def text_length(self) -> int:
        return len(self.text)

    @property
    def is_done(self) -> bool:
        """Whether the cursor is at or beyond the end of the text."""
        return self.pos >= len(self.text)

    def current_position(self) -> Position:
        """Get current line/column in the text."""
        return offset_to_position(self.text, self.pos)

    def position_of(self, offset: int) -> Position:
        return offset_to_position(self.text, offset)

    def peek(self, offset: int = 0) -> str:
        """Return the character at ``pos + offset`` without moving."""
        pos = self.pos + offset
        if pos < 0 or pos >= len(self.text):
            raise OutOfRangeError("Over text max index.", offset=pos)
        return self.text[pos]

    def advance(self, amount: int = 1) -> Optional[str]:
        """Move forward and return the character now under the cursor."""
        self.pos += amount
        return self._char_at(self.pos)

    def retreat(self, amount: int = 1) -> Optional[str]:
        """Move backward and return the character now under the cursor."""
        self.pos -= amount
        return self._char_at(self.pos)

    def walk(self, steps: int, visit: Visitor) -> None:
        """
        Advance exactly ``steps`` times, calling ``visit(char, pos)`` after each.

        Fails before moving if fewer than ``steps`` characters follow the
        cursor. ``visit`` may return False to stop early.
        """
        if self.pos + steps >= len(self.text):
            raise OutOfRangeError("walk steps over max length", offset=self.pos)

        while steps > 0:
            self.advance()
            if visit(self.peek(), self.pos) is False:
                break
            steps -= 1

    def skip_whitespace(self) -> None:
        """Advance past whitespace; stops at the end of the text."""
        while not self.is_done and is_whitespace(self.text[self.pos]):
            self.pos += 1

    def _char_at(self, pos: int) -> Optional[str]:
        if 0 <= pos < len(self.text):
            return self.text[pos]
        return None
