"""
Context manager for validation configuration (root path label, depth bound).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationSettings:
    root_path: str = "root"
    max_depth: Optional[int] = None


# Context variable for the active settings
_settings: ContextVar[ValidationSettings] = ContextVar(
    "validation_settings", default=ValidationSettings()
)


def get_settings() -> ValidationSettings:
    """Return the settings active in the current context."""
    return _settings.get()


@contextmanager
def validation_context(*, root_path: str = "root", max_depth: Optional[int] = None):
    """
    Context manager for validation configuration.

    Args:
        root_path: Label that every message path starts with.
        max_depth: If set, evaluate() raises SchemaDepthError once schema
                   nesting goes deeper than this. Self-referential schemas
                   otherwise recurse until the interpreter's recursion limit.

    Example:
        from schemawalk import evaluate, validation_context

        with validation_context(root_path="payload", max_depth=32):
            result, validation, messages = evaluate(data, schema)
            # messages read "payload.items[0]: ..."
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    token = _settings.set(ValidationSettings(root_path=root_path, max_depth=max_depth))
    try:
        yield
    finally:
        _settings.reset(token)
