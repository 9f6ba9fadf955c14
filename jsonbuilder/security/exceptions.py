"""
Exception classes and error reporting for jsonbuilder.

Errors carry a 0-based position, an optional source snippet and a list of
suggestions for fixing the input.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.cursor import Position


@dataclass
class ErrorContext:
    """Source snippet surrounding an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonBuilderError(Exception):
    """Base exception for all jsonbuilder errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        return self.position.line if self.position else None

    @property
    def column(self) -> Optional[int]:
        return self.position.column if self.position else None

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts[0] += f" at {self.position}"

        if self.context:
            snippet = self.context.context_before + self.context.context_after
            caret = " " * len(self.context.context_before) + "^"
            parts.append(f"Context:\n  {snippet}\n  {caret}")

        if self.suggestions:
            parts.append(
                "Suggestions:\n" + "\n".join(f"  - {s}" for s in self.suggestions)
            )

        return "\n".join(parts)


class ParseError(JsonBuilderError):
    """Raised when the input is not a document the builder accepts."""


class SecurityError(JsonBuilderError):
    """Raised when input exceeds a configured resource limit."""


class ErrorReporter:
    """Builds positioned errors with a snippet of the offending source line."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        context = self._build_context(position)
        return ParseError(message, position, context, suggestions)

    def create_security_error(self, message: str, position: Position) -> SecurityError:
        return SecurityError(message, position, self._build_context(position))

    def _build_context(self, position: Position) -> ErrorContext:
        if 0 <= position.line < len(self.lines):
            line_text = self.lines[position.line]
        else:
            line_text = ""

        column = max(0, min(position.column, len(line_text)))
        half = self.max_context // 2
        context_before = line_text[max(0, column - half) : column]
        context_after = line_text[column : column + half]
        error_char = line_text[column] if column < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * column + "^",
        )


class ErrorSuggestionEngine:
    """Generates hints for common mistakes in JSON input."""

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        suggestions = []

        if char in "'`":
            suggestions.append("Use double quotes for strings")
        elif char in "TFN":
            suggestions.append("Literals are lowercase: use true, false or null")
        elif char == "-":
            suggestions.append("Negative numbers are not supported")
        elif char == ".":
            suggestions.append("Fractional numbers are not supported")
        elif char in "\t\r":
            suggestions.append("Only spaces and newlines are accepted as whitespace")
        elif char in ":]}":
            suggestions.append(f"Check for a missing value before {char!r}")
        elif char.isalpha():
            suggestions.append("Wrap text values in double quotes")

        return suggestions

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        closers = {"object": "}", "array": "]", "string": '"'}
        closer = closers.get(structure_type)
        if closer is None:
            return []
        return [
            f"Add a closing {closer!r} to the {structure_type}",
            "Check whether the input was truncated",
        ]

    @staticmethod
    def suggest_for_invalid_literal(found: str, expected: str) -> list[str]:
        if found.lower() == expected:
            return ["Literals are lowercase: use true, false or null"]
        return [f"Did you mean {expected!r}?"]

    @staticmethod
    def suggest_for_number_terminator(char: str) -> list[str]:
        if char in "]} \n":
            return [
                "Follow numbers with ',' or end the document after them",
                "Set strict_number_terminators=False to accept ']', '}' "
                "and whitespace after a number",
            ]
        return ["Numbers may only contain the digits 0-9"]
