"""
Recursive walk over a value and its schema.

walk() returns a `(result, validation)` pair for every node and appends each
leaf (string) diagnostic to a shared message list in pre-order, left-to-right
discovery order. Nothing raises for bad input data; only malformed schemas
raise SchemaError.
"""

from __future__ import annotations

from typing import Any, Mapping, NoReturn, Optional, Sequence

from .checkers import check_options, check_primitive, run_parser, type_name
from .errors import SchemaDepthError, SchemaError
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
)
from .types import UNDEFINED, Messages, ValidationFail, ValidationMessage, Walked

MISSING_PROPERTY = "Property is missing."
NO_VALID_UNION = "No valid union schemas"


def assert_unreachable(node: Any) -> NoReturn:
    raise SchemaError(f"An unreachable event has occurred: {node!r}")


def walk(
    value: Any,
    schema: Schema,
    path: str,
    messages: Messages,
    *,
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> Walked:
    """
    Validate `value` against `schema`.

    Args:
        value: Input at this position (UNDEFINED when absent)
        schema: Schema for this position
        path: Diagnostic path of this position, e.g. "root.items[2]"
        messages: Log that leaf diagnostics are appended to
        depth: Nesting depth of this call
        max_depth: Raise SchemaDepthError past this depth, if set

    Returns:
        (result, validation) where result is ValidationFail on failure
    """
    if max_depth is not None and depth > max_depth:
        raise SchemaDepthError(path, max_depth)

    walked: Walked
    if value is None:
        if schema.is_nullable:
            walked = (None, None)
        else:
            walked = (ValidationFail, "null is not allowed.")
    elif value is UNDEFINED:
        if schema.is_optional:
            walked = (UNDEFINED, None)
        else:
            walked = (ValidationFail, "undefined is not allowed.")
    else:
        walked = _walk_node(value, schema, path, messages, depth + 1, max_depth)

    # Only leaf diagnostics are logged; containers were logged by their children
    if isinstance(walked[1], str):
        messages.append(ValidationMessage(path, walked[1]))

    return walked


def _walk_node(
    value: Any,
    schema: Schema,
    path: str,
    messages: Messages,
    depth: int,
    max_depth: Optional[int],
) -> Walked:
    """Dispatch on the node kind of a schema for a non-null, defined value."""

    def child(item: Any, item_schema: Schema, item_path: str) -> Walked:
        return walk(
            item, item_schema, item_path, messages, depth=depth, max_depth=max_depth
        )

    match schema.node:
        case Primitive() as node:
            return check_primitive(value, node)

        case Options() as node:
            return check_options(value, node)

        case Parser(fn=fn):
            return run_parser(value, fn)

        case Union(members=members):
            # Every member is walked so each one's diagnostics reach the log
            results = [
                child(value, member, f"{path}{{union({i})}}")
                for i, member in enumerate(members)
            ]
            for result, _ in results:
                if result is not ValidationFail:
                    return result, None
            return ValidationFail, NO_VALID_UNION

        case Array(element=element):
            if not _is_sequence(value):
                return _not_a(value, "an array")
            return _collect_sequence(
                [child(item, element, f"{path}[{i}]") for i, item in enumerate(value)]
            )

        case Tuple(items=items):
            if not _is_sequence(value):
                return _not_a(value, "a tuple")
            if len(value) != len(items):
                return (
                    ValidationFail,
                    f'Tuple of length "{len(value)}" should be "{len(items)}".',
                )
            return _collect_sequence(
                [
                    child(item, item_schema, f"{path}[{i}]")
                    for i, (item, item_schema) in enumerate(zip(value, items))
                ]
            )

        case Object(properties=properties):
            if not isinstance(value, Mapping):
                return _not_a(value, "an object")
            return _collect_mapping(
                (name, child(value.get(name, UNDEFINED), prop, f"{path}.{name}"))
                for name, prop in properties.items()
            )

        case Record() as node:
            if not isinstance(value, Mapping):
                return _not_a(value, "an object")
            return _walk_record(value, node, path, messages, child)

    assert_unreachable(schema.node)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _not_a(value: Any, kind: str) -> Walked:
    return ValidationFail, f'Value of type "{type_name(value)}" is not {kind}.'


def _collect_sequence(walked: Sequence[Walked]) -> Walked:
    """Aggregate child pairs of an Array or Tuple."""
    validation = [v for _, v in walked]
    if any(r is ValidationFail for r, _ in walked):
        return ValidationFail, validation
    return [r for r, _ in walked], validation


def _collect_mapping(walked: Any) -> Walked:
    """
    Aggregate `(key, (result, validation))` children of an Object or Record.

    The first failing child turns the result into ValidationFail and later
    successes are no longer added to it, while every child's validation is
    still recorded. Children whose result is UNDEFINED are omitted.
    """
    result: Any = {}
    validation: dict[Any, Any] = {}

    for key, (child_result, child_validation) in walked:
        if child_result is ValidationFail:
            result = ValidationFail
        elif child_result is not UNDEFINED and result is not ValidationFail:
            result[key] = child_result

        validation[key] = child_validation

    return result, validation


def _walk_record(
    value: Mapping[Any, Any],
    node: Record,
    path: str,
    messages: Messages,
    child: Any,
) -> Walked:
    key_schema = Schema(node.key)
    entries: list[tuple[Any, Walked]] = []

    for raw_key, item in value.items():
        item_path = f"{path}.{raw_key}"
        key, key_validation = child(raw_key, key_schema, item_path)
        if key is ValidationFail:
            # A rejected key reports its own error; its value is not walked
            entries.append((raw_key, (ValidationFail, key_validation)))
            continue
        entries.append((key, child(item, node.value, item_path)))

    if isinstance(node.key, Options) and not node.value.is_optional:
        for option in node.key.values:
            if option not in value:
                messages.append(ValidationMessage(f"{path}.{option}", MISSING_PROPERTY))
                entries.append((option, (ValidationFail, MISSING_PROPERTY)))

    return _collect_mapping(entries)
