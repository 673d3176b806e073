"""
Entry points: locate the source span of the value a JSON-Pointer addresses.
"""

import json
import logging
from typing import NoReturn, Optional

from .core.pointer import PathLike, PointerPath
from .core.scanner import Scanner
from .core.span import EMPTY_SPAN, Span
from .security.exceptions import ErrorReporter, InvalidDocumentError
from .security.limits import LimitValidator
from .utils.config import ScanConfig

logger = logging.getLogger(__name__)

_CONTAINER_DELIMITERS = (("{", "}"), ("[", "]"))


def validate_document(json_text: str, config: Optional[ScanConfig] = None) -> None:
    """
    Check that ``json_text`` is valid JSON with an object or array at the top.

    Raises InvalidDocumentError otherwise. Top-level scalars are rejected even
    though they are valid JSON.
    """
    config = config or ScanConfig()

    try:
        json.loads(json_text, parse_constant=_reject_constant, parse_int=str)
    except ValueError as exc:
        offset = getattr(exc, "pos", 0)
        logger.debug(f"Document rejected, invalid JSON at offset {offset}")
        raise _invalid_document(json_text, offset, config) from exc

    stripped = json_text.strip()
    if not any(
        stripped.startswith(opening) and stripped.endswith(closing)
        for opening, closing in _CONTAINER_DELIMITERS
    ):
        logger.debug("Document rejected, top-level value is not an object or array")
        raise _invalid_document(json_text, 0, config)


def find_span(
    json_text: str, path: PathLike, config: Optional[ScanConfig] = None
) -> Optional[Span]:
    """
    Locate the value addressed by ``path`` and return its span.

    ``path`` is a JSON-Pointer string (``"/a/b/0"``) or a sequence of raw
    segments (``["a", "b", "0"]``). Returns None when ``path`` is empty or
    addresses nothing in the document.
    """
    config = config or ScanConfig()
    assert config.limits is not None

    validator = LimitValidator(config.limits)
    validator.validate_input_size(json_text)
    validate_document(json_text, config)

    pointer = PointerPath(path)
    if pointer.is_empty:
        return None

    logger.debug(f"Scanning {len(json_text)} characters for {pointer!r}")
    scanner = Scanner(
        json_text,
        pointer,
        validator=validator,
        error_reporter=_error_reporter(json_text, config),
    )
    span = scanner.scan()

    if span is None:
        logger.debug(f"No value found for {pointer!r}")
    else:
        logger.debug(f"Located {pointer!r} at [{span.start}, {span.end})")
    return span


def locate(
    json_text: str, path: PathLike, config: Optional[ScanConfig] = None
) -> Span:
    """
    Locate the value addressed by ``path`` and return its span.

    Returns ``Span(0, 0)`` when ``path`` is empty or addresses nothing; use
    find_span() to tell those cases apart from a real match.
    """
    span = find_span(json_text, path, config)
    return EMPTY_SPAN if span is None else span


def extract(
    json_text: str, path: PathLike, config: Optional[ScanConfig] = None
) -> Optional[str]:
    """Return the verbatim source text of the addressed value, or None."""
    span = find_span(json_text, path, config)
    return None if span is None else span.slice(json_text)


def _error_reporter(json_text: str, config: ScanConfig) -> Optional[ErrorReporter]:
    if not config.include_position:
        return None
    return ErrorReporter(
        json_text,
        config.max_error_context,
        include_context=config.include_context,
    )


def _invalid_document(
    json_text: str, offset: int, config: ScanConfig
) -> InvalidDocumentError:
    message = "Parse JSON error."
    suggestions = ["The document must be a JSON object or array"]
    reporter = _error_reporter(json_text, config)
    if reporter is None:
        return InvalidDocumentError(message, suggestions=suggestions, offset=offset)
    return reporter.create_parse_error(
        message, offset, suggestions, error_class=InvalidDocumentError
    )


def _reject_constant(name: str) -> NoReturn:
    # NaN and Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"{name} is not valid JSON")
