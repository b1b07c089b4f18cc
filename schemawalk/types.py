"""
Type definitions for schemawalk.

Provides the ValidationFail and UNDEFINED sentinels, a minimal Result type
(Ok/Err), the message record and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, NamedTuple, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class _Fail(Enum):
    """
    Sentinel marking a subtree that did not validate.

    Compare with `is`; it is distinct from every validated value, `None`
    and `UNDEFINED` included.
    """

    TOKEN = "ValidationFail"

    def __repr__(self) -> str:
        return "ValidationFail"


class _Undefined(Enum):
    """
    Sentinel for an absent value.

    Properties missing from an input mapping are read as UNDEFINED, which is
    accepted only by schemas carrying the OPTIONAL modifier.
    """

    TOKEN = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


ValidationFail = _Fail.TOKEN
UNDEFINED = _Undefined.TOKEN


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


class ValidationMessage(NamedTuple):
    """A leaf diagnostic and the path it was found at."""

    path: str
    err: str


# Type aliases
Validation = Union[None, str, list["Validation"], dict[Any, "Validation"]]
ParserResult = tuple[Any, Union[str, None]]
Walked = tuple[Any, Validation]
Messages = list[ValidationMessage]
