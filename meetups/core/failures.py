"""Failure kinds intercepted at the API boundary.

Each kind is a frozen dataclass carrying exactly the data its error message
needs. ``Failure`` is the closed union the translator dispatches over.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Union


class EmptyConflictListError(ValueError):
    """Raised when a duplicate-entity failure is built without conflicts."""


@dataclass(frozen=True)
class FieldError:
    """A single invalid field or object reported by request validation."""

    name: str
    message: str


@dataclass(frozen=True)
class Violation:
    """A single constraint violation raised while validating domain data."""

    path: str
    message: str


@dataclass(frozen=True)
class MethodNotSupported:
    method: str
    supported: tuple[str, ...] = ()


@dataclass(frozen=True)
class MediaTypeNotSupported:
    content_type: str
    supported: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArgumentNotValid:
    field_errors: tuple[FieldError, ...] = ()
    object_errors: tuple[FieldError, ...] = ()


@dataclass(frozen=True)
class MissingParameter:
    name: str


@dataclass(frozen=True)
class MessageNotReadable:
    cause: str


@dataclass(frozen=True)
class ConstraintViolation:
    violations: tuple[Violation, ...] = ()


@dataclass(frozen=True)
class ArgumentTypeMismatch:
    name: str
    required_type: str | None = None


@dataclass(frozen=True)
class BadCredentials:
    detail: str


@dataclass(frozen=True)
class EntityNotFound:
    entity: str
    id: Any


@dataclass(frozen=True)
class DuplicateEntity:
    entity: str
    values: tuple[Any, ...]
    unique_fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise EmptyConflictListError(f"{self.entity} duplicate requires at least one conflicting value")
        if not self.unique_fields:
            raise EmptyConflictListError(f"{self.entity} duplicate requires at least one unique field")


@dataclass(frozen=True)
class ValueNotAllowed:
    attribute: str
    value: Any
    reason: str


@dataclass(frozen=True)
class NoHandlerFound:
    method: str
    path: str


@dataclass(frozen=True)
class Unhandled:
    # Kept for server-side logging only; never rendered.
    cause: BaseException | None = field(default=None, compare=False, repr=False)


Failure = Union[
    MethodNotSupported,
    MediaTypeNotSupported,
    ArgumentNotValid,
    MissingParameter,
    MessageNotReadable,
    ConstraintViolation,
    ArgumentTypeMismatch,
    BadCredentials,
    EntityNotFound,
    DuplicateEntity,
    ValueNotAllowed,
    NoHandlerFound,
    Unhandled,
]
