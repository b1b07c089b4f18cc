"""
schemawalk - Runtime structural validation driven by a small schema grammar.

Usage:
    from schemawalk import Array, Object, Options, evaluate, optional

    schema = Object({
        "name": "string",
        "role": Options(["admin", "user"]),
        "tags": optional(Array("string")),
    })

    result, validation, messages = evaluate(data, schema)
"""

from .accessor import get_valid_prop, leaf_errors
from .api import Evaluation, assert_valid, evaluate
from .checkers import make_parser
from .context import get_settings, validation_context
from .errors import SchemaDepthError, SchemaError, ValidationError, format_messages
from .literal import from_literal
from .nodes import (
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
    as_schema,
    nullable,
    optional,
)
from .pydantic_interop import to_pydantic
from .types import UNDEFINED, Err, Ok, ValidationFail, ValidationMessage

__all__ = [
    # Sentinels and result types
    "ValidationFail",
    "UNDEFINED",
    "Ok",
    "Err",
    "ValidationMessage",
    # Grammar
    "Schema",
    "Modifier",
    "TypeNode",
    "Primitive",
    "Options",
    "Parser",
    "Union",
    "Array",
    "Tuple",
    "Object",
    "Record",
    "as_schema",
    "nullable",
    "optional",
    "from_literal",
    # Validation
    "evaluate",
    "assert_valid",
    "Evaluation",
    "make_parser",
    "get_valid_prop",
    "leaf_errors",
    "format_messages",
    # Configuration
    "validation_context",
    "get_settings",
    # Errors
    "ValidationError",
    "SchemaError",
    "SchemaDepthError",
    # Interop
    "to_pydantic",
]
