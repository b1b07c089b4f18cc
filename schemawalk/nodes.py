"""
Schema grammar for schemawalk.

A Schema pairs one TypeNode with a set of modifiers. TypeNodes form a closed
set of immutable dataclasses; walk() dispatches over them with `match`.

Usage:
    from schemawalk.nodes import Array, Object, Options, nullable, optional

    schema = Object({
        "name": "string",
        "email": optional("string"),
        "role": Options(["admin", "user"]),
        "tags": Array("string"),
    })
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from .errors import SchemaError

PRIMITIVE_NAMES = ("string", "number", "boolean", "unknown", "any")


class Modifier(Enum):
    NULLABLE = "Null"
    OPTIONAL = "Opt"


@dataclass(frozen=True, slots=True)
class Primitive:
    """Type check against a primitive name; unknown/any accept any value."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in PRIMITIVE_NAMES:
            raise SchemaError(
                f"Unknown primitive {self.name!r}, expected one of: "
                f"{', '.join(PRIMITIVE_NAMES)}"
            )


@dataclass(frozen=True, slots=True)
class Options:
    """Input must equal one of the listed string/number literals."""

    values: tuple[str | int | float, ...]

    def __init__(self, values: Sequence[str | int | float]):
        if isinstance(values, str):
            raise SchemaError("Options expects a sequence of literals, not a str")
        for option in values:
            if isinstance(option, bool) or not isinstance(option, (str, int, float)):
                raise SchemaError(f"Option {option!r} is not a string or number")
        object.__setattr__(self, "values", tuple(values))


@dataclass(frozen=True, slots=True)
class Parser:
    """
    Custom leaf validation/coercion.

    The function returns `(value, None)` on success or
    `(ValidationFail, message)` on failure; `Ok`/`Err` are accepted too.
    """

    fn: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise SchemaError(f"Parser expects a callable, got {type(self.fn).__name__}")


@dataclass(frozen=True, slots=True)
class Union:
    """Input must satisfy at least one of two or three member schemas."""

    members: tuple[Schema, ...]

    def __init__(self, *members: Any):
        if not 2 <= len(members) <= 3:
            raise SchemaError(f"Union takes 2 or 3 members, got {len(members)}")
        object.__setattr__(self, "members", tuple(as_schema(m) for m in members))


@dataclass(frozen=True, slots=True)
class Array:
    """Homogeneous list of one element schema."""

    element: Schema

    def __init__(self, element: Any):
        object.__setattr__(self, "element", as_schema(element))


@dataclass(frozen=True, slots=True)
class Tuple:
    """List of exactly len(items) values, each checked by its position's schema."""

    items: tuple[Schema, ...]

    def __init__(self, items: Sequence[Any]):
        object.__setattr__(self, "items", tuple(as_schema(i) for i in items))


@dataclass(frozen=True, slots=True)
class Object:
    """Mapping with declared properties; undeclared input keys are dropped."""

    properties: dict[str, Schema]

    def __init__(self, properties: Mapping[str, Any]):
        object.__setattr__(
            self,
            "properties",
            {name: as_schema(prop) for name, prop in properties.items()},
        )


@dataclass(frozen=True, slots=True)
class Record:
    """
    Mapping whose every key matches `key` and every value matches `value`.

    With an Options key and a non-optional value, every option must be
    present in the input.
    """

    key: Primitive | Options
    value: Schema

    def __init__(self, key: Any, value: Any):
        key_node = key.node if isinstance(key, Schema) else key
        if isinstance(key_node, str):
            key_node = Primitive(key_node)
        if not isinstance(key_node, (Primitive, Options)):
            raise SchemaError(
                "Record key must be a Primitive or Options, "
                f"got {type(key_node).__name__}"
            )
        object.__setattr__(self, "key", key_node)
        object.__setattr__(self, "value", as_schema(value))


TypeNode = Primitive | Options | Parser | Union | Array | Tuple | Object | Record

_NODE_TYPES = (Primitive, Options, Parser, Union, Array, Tuple, Object, Record)


@dataclass(frozen=True, slots=True)
class Schema:
    """A TypeNode plus its modifiers."""

    node: TypeNode
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)

    @property
    def is_nullable(self) -> bool:
        return Modifier.NULLABLE in self.modifiers

    @property
    def is_optional(self) -> bool:
        return Modifier.OPTIONAL in self.modifiers

    def with_modifiers(self, *modifiers: Modifier) -> Schema:
        """Return new schema with the given modifiers added."""
        return replace(self, modifiers=self.modifiers | frozenset(modifiers))


def as_schema(s: Any) -> Schema:
    """
    Coerce a value to a Schema.

    Conversion rules:
        Schema -> pass through
        TypeNode -> Schema with no modifiers
        "string" | "number" | ... -> Primitive
        dict -> Object with recursive conversion
        Callable -> Parser
    """
    if isinstance(s, Schema):
        return s

    if isinstance(s, _NODE_TYPES):
        return Schema(s)

    if isinstance(s, str):
        return Schema(Primitive(s))

    if isinstance(s, dict):
        return Schema(Object(s))

    if callable(s):
        return Schema(Parser(s))

    raise SchemaError(f"Cannot convert {type(s).__name__} to schema")


def nullable(s: Any) -> Schema:
    """
    Allow None, validate otherwise.

    Usage:
        nullable("string")              # None or a string
        optional(nullable("number"))    # None, missing, or a number
    """
    return as_schema(s).with_modifiers(Modifier.NULLABLE)


def optional(s: Any) -> Schema:
    """Allow a missing value (UNDEFINED), validate otherwise."""
    return as_schema(s).with_modifiers(Modifier.OPTIONAL)
