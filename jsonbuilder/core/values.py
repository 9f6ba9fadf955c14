"""
Value tree produced by the jsonbuilder parser.

The set of variants is closed: Object, Array, String, Number, Boolean and
Null. Values are immutable once built and each container owns its children.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class ValueKind(Enum):
    """Kinds of JSON values."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class Value:
    """Base class of every parsed value."""

    kind: ValueKind

    def to_python(self) -> Any:
        """Convert the value tree into plain Python objects."""
        raise NotImplementedError


@dataclass(frozen=True)
class Object(Value):
    """Mapping from string keys to values; compared without regard to order."""

    members: Mapping[str, Value] = field(default_factory=dict)

    kind = ValueKind.OBJECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


@dataclass(frozen=True)
class Array(Value):
    """Ordered sequence of values."""

    items: tuple[Value, ...] = ()

    kind = ValueKind.ARRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class String(Value):
    value: str

    kind = ValueKind.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number(Value):
    """Non-negative integer."""

    value: int

    kind = ValueKind.NUMBER

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Number must be non-negative")

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    kind = ValueKind.BOOLEAN

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Null(Value):
    kind = ValueKind.NULL

    def to_python(self) -> None:
        return None
