"""
jsonbuilder Core Parsing Engine.

This module provides the character-level parser and the value tree it builds.
"""

from .cursor import Cursor, Position
from .engine import Parser, load, loads, parse
from .values import Array, Boolean, Null, Number, Object, String, Value, ValueKind

__all__ = [
    'parse', 'loads', 'load', 'Parser',
    'Cursor', 'Position',
    'Value', 'ValueKind', 'Object', 'Array', 'String', 'Number', 'Boolean', 'Null',
]
