"""Domain exceptions and the FastAPI boundary hooks that translate them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetups.core.failures import ArgumentNotValid
from meetups.core.failures import ArgumentTypeMismatch
from meetups.core.failures import BadCredentials
from meetups.core.failures import ConstraintViolation
from meetups.core.failures import DuplicateEntity
from meetups.core.failures import EntityNotFound
from meetups.core.failures import Failure
from meetups.core.failures import FieldError
from meetups.core.failures import MediaTypeNotSupported
from meetups.core.failures import MessageNotReadable
from meetups.core.failures import MethodNotSupported
from meetups.core.failures import MissingParameter
from meetups.core.failures import NoHandlerFound
from meetups.core.failures import Unhandled
from meetups.core.failures import ValueNotAllowed
from meetups.core.failures import Violation
from meetups.core.translator import translate

logger = logging.getLogger(__name__)

MISSING_BODY_MESSAGE = "Required request body is missing"

_PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})
_TYPE_NAMES = {
    "int": "int",
    "float": "float",
    "bool": "bool",
    "string": "str",
    "uuid": "UUID",
    "date": "date",
    "datetime": "datetime",
    "time": "time",
    "decimal": "Decimal",
    "list": "list",
    "dict": "dict",
}


class MeetupsError(Exception):
    """Base class for domain errors with a dedicated API error mapping."""

    def to_failure(self) -> Failure:
        raise NotImplementedError


class EntityNotFoundError(MeetupsError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_name: str, entity_id: Any) -> None:
        super().__init__(f"{entity_name} was not found for parameter {entity_id}")
        self.entity_name = entity_name
        self.entity_id = entity_id

    def to_failure(self) -> Failure:
        return EntityNotFound(entity=self.entity_name, id=self.entity_id)


class DuplicateEntityError(MeetupsError):
    """Raised when creating an entity would break a uniqueness rule.

    The conflicting values and the unique field names must both be non-empty;
    otherwise ``EmptyConflictListError`` is raised from the constructor.
    """

    def __init__(
        self,
        entity_name: str,
        values: Sequence[Any],
        unique_fields: Sequence[str],
    ) -> None:
        self._failure = DuplicateEntity(
            entity=entity_name,
            values=tuple(values),
            unique_fields=tuple(unique_fields),
        )
        super().__init__(f"{entity_name} already exists")
        self.entity_name = entity_name
        self.values = list(values)
        self.unique_fields = list(unique_fields)

    def to_failure(self) -> Failure:
        return self._failure


class ValueNotAllowedError(MeetupsError):
    """Raised when a value may not be assigned to an attribute."""

    def __init__(self, attribute: str, value: Any, reason: str) -> None:
        super().__init__(f"The {attribute} {{{value}}} is not allowed because {reason}")
        self.attribute = attribute
        self.value = value
        self.reason = reason

    def to_failure(self) -> Failure:
        return ValueNotAllowed(attribute=self.attribute, value=self.value, reason=self.reason)


class BadCredentialsError(MeetupsError):
    """Raised by business code when supplied credentials are rejected."""

    def __init__(self, message: str = "Bad credentials") -> None:
        super().__init__(message)
        self.message = message

    def to_failure(self) -> Failure:
        return BadCredentials(detail=self.message)


class ConstraintViolationError(MeetupsError):
    """Raised when domain data breaks one or more declared constraints."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        super().__init__("; ".join(f"{item.path}: {item.message}" for item in violations))
        self.violations = tuple(violations)

    def to_failure(self) -> Failure:
        return ConstraintViolation(violations=self.violations)


class MediaTypeNotSupportedError(MeetupsError):
    """Raised when a request body arrives with an unsupported content type."""

    def __init__(self, content_type: str, supported: Sequence[str]) -> None:
        super().__init__(f"{content_type} media type is not supported")
        self.content_type = content_type
        self.supported = tuple(supported)

    def to_failure(self) -> Failure:
        return MediaTypeNotSupported(content_type=self.content_type, supported=self.supported)


def format_location(location: Sequence[Any]) -> str:
    """Render a validation location as a dotted path, e.g. ``items[2].name``."""
    rendered = ""
    for part in location:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


def _required_type(error_type: str) -> str:
    prefix = error_type.split("_", 1)[0]
    return _TYPE_NAMES.get(prefix, prefix)


def _is_type_error(error_type: str) -> bool:
    return error_type.endswith("_parsing") or error_type.endswith("_type")


def classify_request_validation(errors: Sequence[Mapping[str, Any]]) -> Failure:
    """Pick the failure kind that best describes a list of request errors."""
    for error in errors:
        if error.get("type") == "json_invalid":
            ctx = error.get("ctx") or {}
            return MessageNotReadable(cause=str(ctx.get("error", error.get("msg", ""))))

    for error in errors:
        if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
            return MessageNotReadable(cause=MISSING_BODY_MESSAGE)

    for error in errors:
        location = tuple(error.get("loc", ()))
        if error.get("type") == "missing" and location and location[0] in _PARAMETER_LOCATIONS:
            return MissingParameter(name=format_location(location[1:]))

    for error in errors:
        location = tuple(error.get("loc", ()))
        error_type = str(error.get("type", ""))
        if location and location[0] in _PARAMETER_LOCATIONS and _is_type_error(error_type):
            return ArgumentTypeMismatch(
                name=format_location(location[1:]),
                required_type=_required_type(error_type),
            )

    field_errors: list[FieldError] = []
    object_errors: list[FieldError] = []
    for error in errors:
        location = tuple(error.get("loc", ()))
        message = str(error.get("msg", "Invalid value"))
        if len(location) > 1:
            field_errors.append(FieldError(name=format_location(location[1:]), message=message))
        else:
            object_errors.append(FieldError(name=format_location(location) or "request", message=message))
    return ArgumentNotValid(field_errors=tuple(field_errors), object_errors=tuple(object_errors))


def classify_validation_error(exc: ValidationError) -> Failure:
    """Turn a pydantic error raised by business code into a constraint violation."""
    violations = tuple(
        Violation(path=format_location(error["loc"]) or exc.title, message=error["msg"])
        for error in exc.errors()
    )
    return ConstraintViolation(violations=violations)


def classify_http_exception(request: Request, exc: StarletteHTTPException) -> Failure:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allow = (exc.headers or {}).get("Allow", "")
        supported = tuple(sorted(method.strip() for method in allow.split(",") if method.strip()))
        return MethodNotSupported(method=request.method, supported=supported)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return NoHandlerFound(method=request.method, path=request.url.path)
    return Unhandled(cause=exc)


def classify(request: Request, exc: BaseException) -> Failure:
    """Map any exception reaching the boundary onto a failure kind."""
    if isinstance(exc, MeetupsError):
        return exc.to_failure()
    if isinstance(exc, RequestValidationError):
        return classify_request_validation(exc.errors())
    if isinstance(exc, ValidationError):
        return classify_validation_error(exc)
    if isinstance(exc, StarletteHTTPException):
        return classify_http_exception(request, exc)
    return Unhandled(cause=exc)


def _build_error_response(failure: Failure) -> JSONResponse:
    status_code, api_error = translate(failure)
    return JSONResponse(status_code=status_code, content=api_error.model_dump(mode="json"))


def _handle(request: Request, exc: BaseException) -> JSONResponse:
    failure = classify(request, exc)
    if isinstance(failure, Unhandled):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    else:
        logger.warning("%s on %s: %s", type(failure).__name__, request.url.path, exc)
    return _build_error_response(failure)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Translate request parsing and validation errors."""
    return _handle(request, exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Translate pydantic errors raised while validating domain data."""
    return _handle(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Translate routing errors (unsupported method, unknown path)."""
    return _handle(request, exc)


async def meetups_error_handler(request: Request, exc: MeetupsError) -> JSONResponse:
    """Translate domain errors raised by services."""
    return _handle(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Avoid leaking internal exceptions while keeping response shape stable."""
    return _handle(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error translation hooks to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(MeetupsError, meetups_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
