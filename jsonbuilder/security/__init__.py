"""
jsonbuilder Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import ErrorReporter, JsonBuilderError, ParseError, SecurityError
from .limits import LimitValidator

__all__ = [
    'JsonBuilderError', 'ParseError', 'SecurityError', 'ErrorReporter', 'LimitValidator'
]
