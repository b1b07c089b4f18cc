"""
Leaf checkers for schemawalk.

Each checker returns a `(result, validation)` pair for a single non-container
node: `(value, None)` when the value passes, `(ValidationFail, message)`
otherwise.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, TypeVar

from .errors import SchemaError
from .nodes import Options, Primitive
from .types import Err, Ok, ParserResult, ValidationFail, Walked

T = TypeVar("T")


def type_name(value: Any) -> str:
    """Name a value's kind in the grammar's vocabulary (plus function/object)."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def display(value: Any) -> str:
    """Render a value for embedding in an error message."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_primitive(value: Any, name: str) -> bool:
    match name:
        case "string":
            return isinstance(value, str)
        case "number":
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case "boolean":
            return isinstance(value, bool)
        case "unknown" | "any":
            return True
    raise SchemaError(f"Unknown primitive {name!r}")


def check_primitive(value: Any, node: Primitive) -> Walked:
    if _is_primitive(value, node.name):
        return value, None
    return ValidationFail, f'"{display(value)}" is not a {node.name}.'


def _same_literal(option: Any, value: Any) -> bool:
    # 1 == True in Python, but a boolean is never a number option
    return isinstance(option, bool) == isinstance(value, bool) and option == value


def check_options(value: Any, node: Options) -> Walked:
    if any(_same_literal(option, value) for option in node.values):
        return value, None
    allowed = ", ".join(display(option) for option in node.values)
    return ValidationFail, f'"{display(value)}" is not a valid option ({allowed}).'


def run_parser(value: Any, fn: Callable[[Any], Any]) -> Walked:
    """
    Call a parser and normalize its answer to a `(result, validation)` pair.

    Raises:
        SchemaError: If the parser returns something other than a pair or Ok/Err
    """
    outcome = fn(value)

    if isinstance(outcome, Ok):
        return outcome.value, None
    if isinstance(outcome, Err):
        return ValidationFail, str(outcome.error)
    if isinstance(outcome, tuple) and len(outcome) == 2:
        return outcome[0], outcome[1]

    raise SchemaError(
        f"Parser {getattr(fn, '__name__', fn)!r} returned {type(outcome).__name__}, "
        "expected (value, None) or (ValidationFail, message)"
    )


def make_parser(func: Callable[[Any], T]) -> Callable[[Any], ParserResult]:
    """
    Make a parser from a plain transform. Any exception it raises becomes a
    validation failure carrying the exception's message.

    Usage:
        def product_id(raw):
            if raw <= 0:
                raise ValueError("Invalid product ID")
            return raw

        schema = Object({"id": make_parser(product_id)})

    Can also be used as a decorator:
        @make_parser
        def product_code(raw): ...
    """

    @wraps(func)
    def parser(value: Any) -> ParserResult:
        try:
            return func(value), None
        except Exception as e:
            return ValidationFail, str(e)

    return parser
