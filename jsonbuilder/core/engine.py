"""
Parser for jsonbuilder - builds a value tree one character at a time.
"""

import itertools
import logging
import sys
from collections.abc import Iterable, Iterator
from functools import partial
from typing import Any, NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    JsonBuilderError,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig, ParseLimits
from .constants import (
    DIGITS,
    JSON_ESCAPE_MAP,
    LENIENT_NUMBER_TERMINATORS,
    STREAM_CHUNK_SIZE,
    describe_char,
)
from .cursor import Cursor
from .parser_base import BaseParserMixin
from .values import Array, Boolean, Null, Number, Object, String, Value

logger = logging.getLogger(__name__)

# First character -> (remaining characters, value)
LITERALS: dict[str, tuple[str, Value]] = {
    "n": ("ull", Null()),
    "t": ("rue", Boolean(True)),
    "f": ("alse", Boolean(False)),
}


class Parser(BaseParserMixin):
    """Recursive-descent builder driven by a single character of lookahead.

    Every sub-parser leaves the cursor on the last character of the value it
    produced. The one exception is a number, which can only tell where it ends
    by reading one character too far; that terminator is marked pending so the
    enclosing array or object looks at it instead of advancing past it.
    """

    def __init__(
        self,
        chars: Iterable[str],
        config: ParseConfig,
        validator: Optional[LimitValidator] = None,
    ):
        self.cursor = Cursor(chars)
        self.config = config
        self.validator = validator or LimitValidator(config.limits or ParseLimits())
        self.error_reporter = self.validator.reporter
        self.logger = config.logger or logger

        # Shared by every nesting level; cleared by the first array or object.
        self.eof_allowed = True
        self._terminator_pending = False

    def build(self) -> Value:
        """Parse the whole input and return the root value."""
        self.cursor.advance()
        self.cursor.skip_whitespace()
        try:
            return self.parse()
        except RecursionError:
            # max_nesting_depth was configured past what the interpreter allows
            raise SecurityError(
                f"Nesting depth {self.validator.depth} exceeds the interpreter's "
                f"recursion limit ({sys.getrecursionlimit()}); "
                f"lower max_nesting_depth",
                self.cursor.position,
            ) from None

    def parse(self) -> Value:
        """Parse one value starting at the current character."""
        char = self.cursor.skip_whitespace()

        if self.config.trace_dispatch:
            self.logger.debug(
                "dispatch %s at %s", describe_char(char), self.cursor.position
            )

        if char is None:
            self._raise_parse_error(
                "Unexpected end of input, expected a value", self.cursor.position
            )

        if char in LITERALS:
            suffix, value = LITERALS[char]
            return self.parse_literal(suffix, value)

        if char == '"':
            return String(self.parse_string())

        if char == "[":
            return self.parse_array()

        if char == "{":
            return self.parse_object()

        if char in DIGITS:
            return self.parse_number()

        self._raise_parse_error(
            f"Unexpected character {char!r}",
            self.cursor.position,
            ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )

    def parse_literal(self, suffix: str, value: Value) -> Value:
        """Match the rest of true, false or null."""
        found = self.cursor.current or ""
        expected = found + suffix

        for expected_char in suffix:
            char = self.cursor.advance()
            if char is None:
                self._raise_parse_error(
                    f"Unexpected end of input in literal {expected!r}",
                    self.cursor.position,
                    ErrorSuggestionEngine.suggest_for_invalid_literal(found, expected),
                )
            found += char
            if char != expected_char:
                self._raise_parse_error(
                    f"Invalid literal: expected {expected_char!r} of {expected!r}, "
                    f"found {char!r}",
                    self.cursor.position,
                    ErrorSuggestionEngine.suggest_for_invalid_literal(found, expected),
                )

        return value

    def parse_string(self) -> str:
        """Read the body of a string whose opening quote is the current character."""
        start = self.cursor.position
        chars: list[str] = []
        escaping = False

        while True:
            char = self.cursor.advance()

            if char is None:
                message = (
                    "Unexpected end of input in escape sequence"
                    if escaping
                    else "Unexpected end of input: unclosed string"
                )
                self._raise_parse_error(
                    message,
                    self.cursor.position,
                    ErrorSuggestionEngine.suggest_for_unclosed_structure("string"),
                )

            if escaping:
                if char not in JSON_ESCAPE_MAP:
                    self._raise_parse_error(
                        f"Invalid escape sequence '\\{char}'",
                        self.cursor.position,
                        ['Only \\" and \\\\ escapes are supported'],
                    )
                chars.append(JSON_ESCAPE_MAP[char])
                escaping = False
            elif char == "\\":
                escaping = True
            elif char == '"':
                break
            else:
                chars.append(char)

        text = "".join(chars)
        self.validator.check_string(text, start)
        return text

    def parse_number(self) -> Number:
        """Read a run of digits starting at the current character."""
        start = self.cursor.position
        digits = [self.cursor.current or ""]

        while True:
            char = self.cursor.advance()

            if char is None:
                if self.eof_allowed:
                    break
                self._raise_parse_error(
                    "Unexpected end of input in number", self.cursor.position
                )

            if char in DIGITS:
                digits.append(char)
                continue

            if char == "," or (
                not self.config.strict_number_terminators
                and char in LENIENT_NUMBER_TERMINATORS
            ):
                self._terminator_pending = True
                break

            self._raise_parse_error(
                f"Unexpected character {char!r} after number",
                self.cursor.position,
                ErrorSuggestionEngine.suggest_for_number_terminator(char),
            )

        return Number(self.validator.number_value("".join(digits), start))

    def parse_array(self) -> Array:
        """Parse an array whose opening bracket is the current character."""
        start = self.cursor.position
        self.validate_and_enter_structure(start)
        self.eof_allowed = False
        items: list[Value] = []

        while True:
            self._next_token()
            char = self.cursor.skip_whitespace()

            if char == "]":
                break
            if char == ",":
                continue
            if char is None:
                self._raise_unclosed("array", "]")

            items.append(self.parse())
            self.validator.check_container("array", len(items), start)

        self.validate_and_exit_structure()
        return Array(tuple(items))

    def parse_object(self) -> Object:
        """Parse an object whose opening brace is the current character."""
        start = self.cursor.position
        self.validate_and_enter_structure(start)
        self.eof_allowed = False
        members: dict[str, Value] = {}

        while True:
            self._next_token()
            char = self.cursor.skip_whitespace()

            if char == "}":
                break
            if char == ",":
                continue
            if char is None:
                self._raise_unclosed("object", "}")
            if char != '"':
                self._raise_parse_error(
                    f"Unexpected character {char!r} in object, expected '\"' or '}}'",
                    self.cursor.position,
                    ["Object keys must be double-quoted strings"],
                )

            key = self.parse_string()
            self._expect_colon(key)
            self.cursor.advance()
            self.store_member(members, key, self.parse())
            self.validator.check_container("object", len(members), start)

        self.validate_and_exit_structure()
        return Object(members)

    def _next_token(self) -> Optional[str]:
        """Advance, unless a number left its terminator to be looked at."""
        if self._terminator_pending:
            self._terminator_pending = False
            return self.cursor.current
        return self.cursor.advance()

    def _expect_colon(self, key: str) -> None:
        char = self.cursor.advance()
        if char != ":":
            self._raise_parse_error(
                f"Expected ':' after key {key!r}, but found {describe_char(char)}",
                self.cursor.position,
                [
                    "Object keys must be followed by a colon",
                    "Whitespace is not allowed between a key and its colon",
                ],
            )

    def _raise_unclosed(self, structure_type: str, closer: str) -> NoReturn:
        self._raise_parse_error(
            f"Unexpected end of input, expected {closer!r} to close {structure_type}",
            self.cursor.position,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure_type),
        )


def parse(
    text: Union[str, Iterable[str], TextIO],
    config: Optional[ParseConfig] = None,
) -> Value:
    """
    Parse a JSON document into a Value tree.

    Args:
        text: A string, an iterable of characters, or a text stream
        config: Optional ParseConfig for limits, error reporting and logging

    Returns:
        The root Value

    Raises:
        ParseError: If the input is malformed
        SecurityError: If a configured limit is exceeded
    """
    if config is None:
        config = ParseConfig()

    validator = LimitValidator(config.limits or ParseLimits())

    if isinstance(text, str):
        validator.check_input_length(len(text))
        chars: Iterable[str] = text
        if config.include_context:
            validator.reporter = ErrorReporter(text, config.max_error_context)
    elif hasattr(text, "read"):
        chars = _counted(_iter_stream(text), validator)
    else:
        chars = _counted(text, validator)

    parser = Parser(chars, config, validator)
    active_logger = config.logger or logger
    try:
        result = parser.build()
    except JsonBuilderError as e:
        active_logger.debug("Parse failed: %s", e.message)
        raise

    active_logger.debug("Parsed %s value", result.kind.value)
    return result


def loads(
    s: Union[str, bytes, bytearray],
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a JSON string into plain Python objects.

    Objects become dicts, arrays lists, numbers ints, and null None.
    """
    if isinstance(s, (bytes, bytearray)):
        try:
            s = s.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(
                f"Input is not valid UTF-8: {e.reason} at byte {e.start}"
            ) from e
    return parse(s, config).to_python()


def load(fp: TextIO, *, config: Optional[ParseConfig] = None) -> Any:
    """Deserialize a JSON text stream into plain Python objects."""
    return parse(fp, config).to_python()


def _iter_stream(stream: TextIO) -> Iterator[str]:
    """Yield the characters of a stream, reading it in fixed-size chunks."""
    chunks = iter(partial(stream.read, STREAM_CHUNK_SIZE), "")
    return itertools.chain.from_iterable(chunks)


def _counted(chars: Iterable[str], validator: LimitValidator) -> Iterator[str]:
    """Enforce the input size limit on input of unknown length."""
    for char in chars:
        validator.count_char()
        yield char
