"""
Resource accounting for a single parse.

A LimitValidator belongs to one parse. It counts the characters pulled from
input of unknown length, tracks how deeply arrays and objects are nested, and
checks every finished string, digit run and container against ParseLimits.
Violations are reported at the position where the offending value starts.
"""

from typing import NoReturn, Optional

from ..core.cursor import Position
from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, ParseError, SecurityError


class LimitValidator:
    """Checks one parse against its configured limits."""

    def __init__(self, limits: ParseLimits, reporter: Optional[ErrorReporter] = None):
        self.limits = limits
        self.reporter = reporter
        self.depth = 0
        self.chars_read = 0

    def check_input_length(self, length: int) -> None:
        """Reject string input longer than max_input_size before parsing starts."""
        if length > self.limits.max_input_size:
            self._violation(
                f"Input of {length} characters exceeds max_input_size "
                f"({self.limits.max_input_size})"
            )

    def count_char(self) -> None:
        """Account for one character pulled from a stream or iterable."""
        self.chars_read += 1
        if self.chars_read > self.limits.max_input_size:
            self._violation(
                f"Input exceeds max_input_size ({self.limits.max_input_size}) "
                f"after {self.chars_read} characters"
            )

    def push(self, start: Position) -> None:
        """Enter the array or object opening at start."""
        self.depth += 1
        if self.depth > self.limits.max_nesting_depth:
            self._violation(
                f"Nesting depth {self.depth} exceeds max_nesting_depth "
                f"({self.limits.max_nesting_depth})",
                start,
            )

    def pop(self) -> None:
        """Leave the innermost array or object."""
        self.depth -= 1

    def check_string(self, text: str, start: Position) -> None:
        if len(text) > self.limits.max_string_length:
            self._violation(
                f"String of {len(text)} characters exceeds max_string_length "
                f"({self.limits.max_string_length})",
                start,
            )

    def number_value(self, digits: str, start: Position) -> int:
        """Convert a digit run, enforcing max_number_length and max_number_value.

        A run that is too long is a resource violation; a run whose value does
        not fit the unsigned range is malformed input and raises ParseError.
        """
        if len(digits) > self.limits.max_number_length:
            self._violation(
                f"Number of {len(digits)} digits exceeds max_number_length "
                f"({self.limits.max_number_length})",
                start,
            )

        maximum = self.limits.max_number_value
        significant = digits.lstrip("0") or "0"
        # Compare lengths first so huge runs never reach int()
        if len(significant) > len(str(maximum)) or int(significant) > maximum:
            message = (
                f"Number {digits} does not fit in an unsigned integer "
                f"(maximum {maximum})"
            )
            if self.reporter:
                raise self.reporter.create_parse_error(message, start)
            raise ParseError(message, start)
        return int(significant)

    def check_container(self, kind: str, size: int, start: Position) -> None:
        """Check the member count of the array or object opening at start."""
        if kind == "array":
            name, limit = "max_array_items", self.limits.max_array_items
        else:
            name, limit = "max_object_keys", self.limits.max_object_keys
        if size > limit:
            self._violation(
                f"{kind.capitalize()} with {size} members exceeds {name} ({limit})",
                start,
            )

    def _violation(
        self, message: str, position: Optional[Position] = None
    ) -> NoReturn:
        if self.reporter and position is not None:
            raise self.reporter.create_security_error(message, position)
        raise SecurityError(message, position)
