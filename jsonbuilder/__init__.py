"""
jsonbuilder - a character-at-a-time recursive-descent JSON parser.

jsonbuilder reads a JSON document one character at a time, keeping exactly one
character of lookahead, and builds an immutable tree of typed values. Errors
report the 0-based line and column of the offending character.

Supported grammar:
- null, true, false
- strings with the \\" and \\\\ escapes (literal newlines are kept)
- non-negative integers
- arrays and objects, nested to a configurable depth

Quick Start:
    import jsonbuilder
    value = jsonbuilder.parse('{"items":[null, true]}')
    value["items"][1]                    # Boolean(value=True)

    # Plain Python objects
    data = jsonbuilder.loads('[null, false]')   # [None, False]

    # Limits and error reporting
    from jsonbuilder import ParseConfig, ParseLimits
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=20))
    jsonbuilder.parse(text, config)
"""

from .core.engine import load, loads, parse
from .core.values import Array, Boolean, Null, Number, Object, String, Value, ValueKind
from .security.exceptions import JsonBuilderError, ParseError, SecurityError
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsonbuilder contributors"

__all__ = [
    # Parsing functions
    "parse", "loads", "load",
    # Value tree
    "Value", "ValueKind", "Object", "Array", "String", "Number", "Boolean", "Null",
    # Configuration classes
    "ParseConfig", "ParseLimits",
    # Exception classes
    "JsonBuilderError", "ParseError", "SecurityError",
]
