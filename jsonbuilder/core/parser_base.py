"""
Helpers shared by the parser's sub-parsers.
"""

from typing import NoReturn, Optional

from ..security.exceptions import ErrorReporter, ParseError
from ..security.limits import LimitValidator
from .cursor import Position
from .values import Value


class BaseParserMixin:
    """Common parsing functionality: limits, member storage and error raising."""

    validator: LimitValidator
    error_reporter: Optional[ErrorReporter] = None

    def validate_and_enter_structure(self, start: Position) -> None:
        """Count one more level of nesting for the structure opening at start."""
        self.validator.push(start)

    def validate_and_exit_structure(self) -> None:
        self.validator.pop()

    def store_member(self, members: dict[str, Value], key: str, value: Value) -> None:
        """Insert a member; a repeated key overwrites the earlier value."""
        members[key] = value

    def _raise_parse_error(
        self, message: str, position: Position, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(message, position, suggestions)
        raise ParseError(message, position, suggestions=suggestions)
