"""
Spans and the one-shot tracker that records them.
"""

from enum import Enum
from typing import NamedTuple, Optional

from ..security.exceptions import TrackerStateError
from .cursor import Cursor


class Span(NamedTuple):
    """Half-open ``[start, end)`` character range in the source text."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def slice(self, text: str) -> str:
        """Return the text this span covers."""
        return text[self.start : self.end]

    def to_dict(self) -> dict[str, int]:
        """Render as ``{"from": ..., "to": ...}``."""
        return {"from": self.start, "to": self.end}


EMPTY_SPAN = Span(0, 0)


class TrackedSpan(NamedTuple):
    """Offsets and verbatim text recorded by a finished SpanTracker."""

    start: int
    end: int
    substring: str

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


class ParseResult(NamedTuple):
    """
    Outcome of scanning one unit (value, string, key-value pair).

    ``value`` is the verbatim source text of the unit. ``match`` is the span of
    the addressed value when this unit or one of its descendants produced it.
    """

    value: str
    start: int
    end: int
    match: Optional[Span] = None

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


class TrackerState(Enum):
    """Lifecycle of a SpanTracker."""

    IDLE = "idle"
    STARTED = "started"
    FINISHED = "finished"


class SpanTracker:
    """Records the offsets bracketing a single parse unit. Never reused."""

    def __init__(self, cursor: Cursor) -> None:
        self.cursor = cursor
        self.start_pos = 0
        self.end_pos = 0
        self._state = TrackerState.IDLE

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state is TrackerState.FINISHED

    def start(self) -> int:
        """Record the current cursor position as the start of the unit."""
        if self._state is TrackerState.STARTED:
            raise TrackerStateError("Span tracker is already started.")
        if self._state is TrackerState.FINISHED:
            raise TrackerStateError("Span tracker is already finished.")

        self.start_pos = self.cursor.pos
        self.end_pos = self.start_pos
        self._state = TrackerState.STARTED
        return self.start_pos

    def finish(self) -> TrackedSpan:
        """Record the current cursor position as the end of the unit."""
        if self._state is TrackerState.IDLE:
            raise TrackerStateError("Span tracker was not started.")
        if self._state is TrackerState.FINISHED:
            raise TrackerStateError("Span tracker is already finished.")

        self.end_pos = self.cursor.pos
        self._state = TrackerState.FINISHED
        return TrackedSpan(
            self.start_pos,
            self.end_pos,
            self.cursor.text[self.start_pos : self.end_pos],
        )
