"""
Character cursor for jsonbuilder - one character of lookahead with position tracking.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .constants import WHITESPACE


@dataclass
class Position:
    """Position in source text (0-based line and column)."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class Cursor:
    """Pulls characters from an iterable and tracks where the lookahead sits.

    ``line`` and ``column`` always describe the position of ``current``. Once
    the input is exhausted ``current`` is ``None`` and the position points one
    past the last character.
    """

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars: Iterator[str] = iter(chars)
        self.current: Optional[str] = None
        self.line = 0
        self.column = 0

    @property
    def position(self) -> Position:
        """Get the position of the current character."""
        return Position(self.line, self.column)

    def advance(self) -> Optional[str]:
        """Fetch the next character, store it as current and return it."""
        previous = self.current
        if previous == "\n":
            self.line += 1
            self.column = 0
        elif previous is not None:
            self.column += 1

        self.current = next(self._chars, None)
        return self.current

    def skip_whitespace(self) -> Optional[str]:
        """Skip spaces and newlines; return the first significant character."""
        while self.current is not None and self.current in WHITESPACE:
            self.advance()
        return self.current
