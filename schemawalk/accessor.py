"""
Helpers for reading validation trees.
"""

from typing import Any

from .types import Validation


def get_valid_prop(validation: Validation, prop: Any) -> Validation:
    """
    Look up the validation of one property (or list index) of a tree.

    - None: nothing failed below, so the property is clean (None)
    - str: a leaf failure at this level applies to every property below it
    - dict/list: the entry for `prop`, or None when there is none

    Examples:
        get_valid_prop(None, "name")                        # None
        get_valid_prop("null is not allowed.", "name")      # "null is not allowed."
        get_valid_prop({"name": "bad"}, "name")             # "bad"
        get_valid_prop(get_valid_prop(v, "items"), 0)       # drill into a list
    """
    if validation is None or isinstance(validation, str):
        return validation

    if isinstance(validation, dict):
        return validation.get(prop)

    if isinstance(validation, list):
        if isinstance(prop, int) and -len(validation) <= prop < len(validation):
            return validation[prop]
        return None

    raise TypeError(f"Not a validation tree: {type(validation).__name__}")


def leaf_errors(validation: Validation) -> list[str]:
    """Collect the leaf messages of a validation tree in pre-order."""
    if validation is None:
        return []
    if isinstance(validation, str):
        return [validation]

    children = validation.values() if isinstance(validation, dict) else validation
    errors: list[str] = []
    for child in children:
        errors.extend(leaf_errors(child))
    return errors
