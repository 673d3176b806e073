"""
Configuration and limits for jsonspan scanning.

The scanner recurses once per nesting level, so the nesting limit is what
keeps adversarially deep documents from exhausting the interpreter stack.
"""

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_MAX_INPUT_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_NESTING_DEPTH = 200


@dataclass
class ScanLimits:
    """Security limits applied before and during a scan."""

    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""

    include_position: bool = True
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ScanConfig:
    """Configuration options for locating spans."""

    limits: Optional[ScanLimits] = None
    error_reporting: Optional[ErrorReporting] = None

    def __init__(
        self,
        *,
        limits: Optional[ScanLimits] = None,
        error_reporting: Optional[ErrorReporting] = None,
        **config_options: Any,  # flat keyword form, e.g. max_nesting_depth=50
    ):
        unknown = set(config_options) - _FLAT_OPTIONS
        if unknown:
            raise TypeError(f"Unknown configuration options: {sorted(unknown)}")

        if limits is not None:
            self.limits = limits
        else:
            self.limits = ScanLimits(
                max_input_size=config_options.get(
                    "max_input_size", DEFAULT_MAX_INPUT_SIZE
                ),
                max_nesting_depth=config_options.get(
                    "max_nesting_depth", DEFAULT_MAX_NESTING_DEPTH
                ),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_position=config_options.get("include_position", True),
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
            )

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.limits is not None
        return self.limits.max_input_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth of objects and arrays."""
        assert self.limits is not None
        return self.limits.max_nesting_depth

    @property
    def include_position(self) -> bool:
        """Whether errors carry line/column information."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @include_position.setter
    def include_position(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_position = value

    @property
    def include_context(self) -> bool:
        """Whether errors carry a source snippet."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context


_FLAT_OPTIONS = frozenset(
    {
        "max_input_size",
        "max_nesting_depth",
        "include_position",
        "include_context",
        "max_error_context",
    }
)
