"""
Compile Object schemas to Pydantic models.
"""

from __future__ import annotations

import typing
from typing import Any, Literal

from pydantic import create_model

from .errors import SchemaError
from .nodes import (
    Array,
    Object,
    Options,
    Parser,
    Primitive,
    Record,
    Schema,
    Tuple,
    Union,
    as_schema,
)

_PRIMITIVE_TYPES: dict[str, Any] = {
    "string": str,
    "number": int | float,
    "boolean": bool,
    "unknown": Any,
    "any": Any,
}


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile an Object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Object schema (or a dict of properties)

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": "string",
            "email": optional("string"),
        })
        user = User(name="Alice")
    """
    s = as_schema(schema)
    if not isinstance(s.node, Object):
        raise SchemaError("Schema must be an Object")

    return _model_from_object(name, s.node)


def _model_from_object(name: str, node: Object) -> type:
    fields: dict[str, Any] = {}

    for key, prop in node.properties.items():
        fields[key] = _extract_pydantic_field(f"{name}_{key}", prop)

    return create_model(name, **fields)


def _extract_pydantic_field(name: str, s: Schema) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a property schema."""
    field_type = _annotation(name, s)

    if s.is_optional:
        return (field_type | None, None)
    return (field_type, ...)


def _annotation(name: str, s: Schema) -> Any:
    annotation = _node_annotation(name, s)
    if s.is_nullable:
        return annotation | None
    return annotation


def _node_annotation(name: str, s: Schema) -> Any:
    match s.node:
        case Primitive(name=primitive):
            return _PRIMITIVE_TYPES[primitive]
        case Options(values=values):
            return Literal[values]
        case Parser():
            return Any
        case Union(members=members):
            return typing.Union[
                tuple(_annotation(f"{name}_{i}", m) for i, m in enumerate(members))
            ]
        case Array(element=element):
            return list[_annotation(name, element)]  # type: ignore[misc]
        case Tuple(items=items):
            if not items:
                return tuple[()]
            return tuple[
                tuple(_annotation(f"{name}_{i}", item) for i, item in enumerate(items))
            ]
        case Object() as node:
            return _model_from_object(name, node)
        case Record(key=key, value=value):
            key_type = _node_annotation(name, Schema(key))
            return dict[key_type, _annotation(name, value)]  # type: ignore[valid-type]

    raise SchemaError(f"An unreachable event has occurred: {s.node!r}")
