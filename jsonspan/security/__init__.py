"""
jsonspan Error Reporting and Limits.

This module provides the exception hierarchy and scanning limits.
"""

from .exceptions import ErrorReporter, JsonSpanError, ParseError, SecurityError
from .limits import LimitValidator

__all__ = ['JsonSpanError', 'ParseError', 'SecurityError', 'ErrorReporter', 'LimitValidator']
