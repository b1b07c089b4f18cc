"""
Exceptions raised by schemawalk.

Data-level validation problems never raise; they are recorded in the
validation tree and message log. These exceptions cover malformed schemas
and the assert_valid() convenience wrapper.
"""

from __future__ import annotations

from typing import Sequence

from .types import Validation, ValidationMessage


class SchemaError(TypeError):
    """The schema itself is malformed or uses an unknown node kind."""


class SchemaDepthError(SchemaError):
    """Schema nesting went past the configured max_depth."""

    def __init__(self, path: str, max_depth: int):
        super().__init__(f"Schema depth exceeded {max_depth} at {path}")
        self.path = path
        self.max_depth = max_depth


def format_messages(messages: Sequence[ValidationMessage]) -> str:
    """Render messages as one "<path>: <err>" line each."""
    return "\n".join(f"{message.path}: {message.err}" for message in messages)


class ValidationError(ValueError):
    """
    Raised by assert_valid() when the input does not conform.

    Attributes:
        validation: The validation tree for the failed input
        messages: Ordered leaf diagnostics
    """

    def __init__(self, validation: Validation, messages: Sequence[ValidationMessage]):
        self.validation = validation
        self.messages = tuple(messages)
        super().__init__(f"Validation failed:\n{format_messages(self.messages)}")
