"""
Build schemas from the nested literal grammar.

A literal schema is a `(type, args)` pair where args lists any of "Null" and
"Opt":

    ("string", [])
    (("Options", ["A", "B"]), ["Opt"])
    ({"one": ("number", []), "two": ("string", ["Null"])}, [])
    (("Tuple", [("string", []), ("number", [])]), [])
    (("Union", ("string", []), ("number", [])), [])
    (("Record", ("Options", ["A", "B"]), ("number", [])), [])
    (("number", ["Null"]), [])          # array of nullable numbers
    (parse_product_id, [])              # parser
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import SchemaError
from .nodes import (
    PRIMITIVE_NAMES,
    Array,
    Modifier,
    Object,
    Options,
    Parser,
    Primitive,
    Record,
    Schema,
    Tuple,
    TypeNode,
    Union,
)

logger = logging.getLogger(__name__)

_ARGS = {modifier.value: modifier for modifier in Modifier}


def from_literal(literal: Any) -> Schema:
    """
    Read a `(type, args)` literal into a Schema.

    Raises:
        SchemaError: If the literal does not follow the grammar
    """
    logger.debug("Reading schema literal %r", literal)
    return _read_schema(literal)


def _is_pair(literal: Any) -> bool:
    return isinstance(literal, (list, tuple)) and len(literal) == 2


def _read_schema(literal: Any) -> Schema:
    if not _is_pair(literal):
        raise SchemaError(f"Expected a (type, args) pair, got {literal!r}")

    type_literal, args = literal
    if isinstance(args, str) or not isinstance(args, (list, tuple)):
        raise SchemaError(f"Schema args must be a list, got {args!r}")

    modifiers = set()
    for arg in args:
        if arg not in _ARGS:
            raise SchemaError(f"Unknown schema arg {arg!r}, expected 'Null' or 'Opt'")
        modifiers.add(_ARGS[arg])

    return Schema(_read_type(type_literal), frozenset(modifiers))


def _read_type(literal: Any) -> TypeNode:
    if isinstance(literal, str):
        if literal not in PRIMITIVE_NAMES:
            raise SchemaError(f"Unknown primitive {literal!r}")
        return Primitive(literal)

    if isinstance(literal, dict):
        return Object({name: _read_schema(prop) for name, prop in literal.items()})

    if callable(literal):
        return Parser(literal)

    if not isinstance(literal, (list, tuple)) or not literal:
        raise SchemaError(f"Cannot read schema type {literal!r}")

    match literal[0]:
        case "Options":
            return Options(literal[1])
        case "Tuple":
            return Tuple([_read_schema(item) for item in literal[1]])
        case "Union":
            return Union(*(_read_schema(member) for member in literal[1:]))
        case "Record":
            if len(literal) != 3:
                raise SchemaError("Record literal must be ('Record', key, value)")
            return Record(_read_type(literal[1]), _read_schema(literal[2]))

    # Anything else is the (type, args) pair of an array's elements
    return Array(_read_schema(literal))
