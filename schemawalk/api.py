"""
Top-level entry points: evaluate() and assert_valid().
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .context import get_settings
from .errors import ValidationError
from .nodes import as_schema
from .types import Err, Messages, Ok, Validation, ValidationFail
from .walk import walk

logger = logging.getLogger(__name__)


class Evaluation(NamedTuple):
    """
    Everything one evaluate() call produces.

    Unpacks as `result, validation, messages`.
    """

    result: Any
    validation: Validation
    messages: Messages

    @property
    def is_valid(self) -> bool:
        return self.result is not ValidationFail

    @property
    def outcome(self) -> Ok[Any] | Err[Messages]:
        """Ok(result) if the input conforms, else Err(messages)."""
        if self.is_valid:
            return Ok(self.result)
        return Err(self.messages)


def evaluate(value: Any, schema: Any) -> Evaluation:
    """
    Validate a value against a schema.

    Args:
        value: The input to check (UNDEFINED stands for a missing value)
        schema: A Schema, TypeNode, or anything as_schema() accepts

    Returns:
        Evaluation(result, validation, messages) where result is
        ValidationFail if the input does not conform

    Usage:
        schema = Object({"name": "string", "age": optional("number")})
        result, validation, messages = evaluate({"name": "Alice"}, schema)
    """
    settings = get_settings()
    messages: Messages = []

    result, validation = walk(
        value,
        as_schema(schema),
        settings.root_path,
        messages,
        max_depth=settings.max_depth,
    )

    if result is ValidationFail:
        logger.debug("Validation failed with %d message(s)", len(messages))
    else:
        logger.debug("Validation passed")

    return Evaluation(result, validation, messages)


def assert_valid(value: Any, schema: Any) -> Any:
    """
    Validate a value and return the result.

    Raises:
        ValidationError: If the value does not conform; it carries the
                         validation tree and the message list
    """
    result, validation, messages = evaluate(value, schema)

    if result is ValidationFail:
        raise ValidationError(validation, messages)

    return result
