"""
JSON-Pointer (RFC 6901) helpers and the depth-synchronized path matcher.
"""

from collections.abc import Sequence
from typing import Optional, Union

from ..security.exceptions import InvalidPointerError

Segment = Union[str, int]
PathLike = Union[str, Sequence[Segment]]


def escape_segment(segment: str) -> str:
    """Escape ``~`` and ``/`` for use inside a pointer string."""
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str) -> str:
    """Restore ``~1`` to ``/`` and ``~0`` to ``~``, in that order."""
    return segment.replace("~1", "/").replace("~0", "~")


def parse_pointer(pointer: str) -> list[str]:
    """
    Split a pointer string into unescaped segments.

    ``""`` addresses the whole document and yields no segments. ``"/"``
    addresses the key ``""``.
    """
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise InvalidPointerError(f"Invalid JSON pointer: {pointer!r}")
    return [unescape_segment(segment) for segment in pointer[1:].split("/")]


def compile_pointer(segments: Sequence[Segment]) -> str:
    """Build a pointer string from segments; inverse of parse_pointer."""
    return "".join("/" + escape_segment(str(segment)) for segment in segments)


class PointerPath:
    """
    Target segments plus the index of the next segment still to be matched.

    The index only moves forward, one step per match, and a key or array index
    is only compared when the scanner's depth equals that index.
    """

    def __init__(self, path: PathLike) -> None:
        if isinstance(path, str):
            self.segments: tuple[str, ...] = tuple(parse_pointer(path))
        else:
            self.segments = tuple(
                segment if isinstance(segment, str) else str(segment)
                for segment in path
            )
        self._index = 0

    def __len__(self) -> int:
        return len(self.segments)

    def __repr__(self) -> str:
        return f"PointerPath({compile_pointer(self.segments)!r}, index={self._index})"

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def matched_count(self) -> int:
        """Number of segments matched so far."""
        return self._index

    @property
    def current_segment(self) -> Optional[str]:
        """The next unmatched segment, or None once every segment matched."""
        return self.segment_at(self._index)

    def segment_at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None

    def is_last_segment(self) -> bool:
        return self._index == len(self.segments) - 1

    def advance(self) -> int:
        self._index += 1
        return self._index

    def matches(self, depth: int, key: str) -> bool:
        """Whether ``key`` at ``depth`` is the next expected segment."""
        if depth != self._index:
            return False
        return key == self.current_segment
