"""
Common constants and mappings used across the jsonbuilder library.
"""

from typing import Optional

# The only escape sequences the builder understands
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
}

WHITESPACE = " \n"
DIGITS = "0123456789"

# Extra characters that may end a digit run when strict terminators are off
LENIENT_NUMBER_TERMINATORS = "]}" + WHITESPACE

# Chunk size used when pulling characters from a text stream
STREAM_CHUNK_SIZE = 8192


def describe_char(char: Optional[str]) -> str:
    """Render a lookahead character for error messages."""
    if char is None:
        return "end of input"
    return repr(char)
