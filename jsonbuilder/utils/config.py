"""
Configuration and limits for jsonbuilder parsing.

This module defines security limits and configuration options for safe JSON parsing.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional

# Largest value of the platform's native unsigned integer type
NATIVE_UNSIGNED_MAX = sys.maxsize * 2 + 1


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100
    max_number_value: int = NATIVE_UNSIGNED_MAX


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000


_SIZE_FIELDS = (
    "max_input_size", "max_string_length", "max_number_length", "max_number_value"
)
_STRUCTURE_FIELDS = ("max_nesting_depth", "max_object_keys", "max_array_items")


@dataclass
class ParseLimits:
    """Security limits for JSON parsing to prevent abuse."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_limits: int,
    ):
        unknown = set(flat_limits) - set(_SIZE_FIELDS) - set(_STRUCTURE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_limits.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_limits.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum number of digits in a number."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_number_value(self) -> int:
        """Largest integer a number may hold."""
        assert self.size_limits is not None
        return self.size_limits.max_number_value

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    # Only ',' or end of input may follow a digit run when set.
    strict_number_terminators: bool = True


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class Diagnostics:
    """Logging settings."""
    trace_dispatch: bool = False
    logger: Optional[logging.Logger] = None


@dataclass
class ParseConfig:
    """Configuration options for jsonbuilder parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None
    diagnostics: Optional[Diagnostics] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        diagnostics: Optional[Diagnostics] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                strict_number_terminators=config_options.get(
                    "strict_number_terminators", True
                ),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
            )

        if diagnostics is not None:
            self.diagnostics = diagnostics
        else:
            self.diagnostics = Diagnostics(
                trace_dispatch=config_options.get("trace_dispatch", False),
                logger=config_options.get("logger"),
            )

    @property
    def strict_number_terminators(self) -> bool:
        """Whether numbers may only be terminated by ',' or end of input."""
        assert self.behavior is not None
        return self.behavior.strict_number_terminators

    @strict_number_terminators.setter
    def strict_number_terminators(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.strict_number_terminators = value

    @property
    def include_context(self) -> bool:
        """Whether to include a source snippet in errors."""
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

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value

    @property
    def trace_dispatch(self) -> bool:
        """Whether every dispatch is logged at DEBUG level."""
        assert self.diagnostics is not None
        return self.diagnostics.trace_dispatch

    @trace_dispatch.setter
    def trace_dispatch(self, value: bool) -> None:
        assert self.diagnostics is not None
        self.diagnostics.trace_dispatch = value

    @property
    def logger(self) -> Optional[logging.Logger]:
        """Logger overriding the module logger, if any."""
        assert self.diagnostics is not None
        return self.diagnostics.logger
