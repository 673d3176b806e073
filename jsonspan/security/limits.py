"""
Security limits and validation for jsonspan.
This module guards against oversized input and stack-exhausting nesting.
"""

from ..utils.config import ScanLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates scanning limits to prevent resource exhaustion."""

    def __init__(self, limits: ScanLimits):
        self.limits = limits
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def enter_structure(self, offset: int = 0) -> None:
        """Track entering a nested object or array and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.limits.max_nesting_depth:
            raise SecurityError(
                f"Nesting depth {self.nesting_depth} exceeds limit "
                f"{self.limits.max_nesting_depth}",
                offset=offset,
            )

    def exit_structure(self) -> None:
        """Track leaving a nested object or array."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1
