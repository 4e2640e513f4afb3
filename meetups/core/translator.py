"""Pure mapping from failure kinds to ``(status_code, ApiError)`` pairs.

Every function here reads only its argument and returns a new value, so the
translator can be called concurrently from any request worker.
"""

from __future__ import annotations

from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

from meetups.core.error_codes import ApiErrorCode
from meetups.core.failures import ArgumentNotValid
from meetups.core.failures import ArgumentTypeMismatch
from meetups.core.failures import BadCredentials
from meetups.core.failures import ConstraintViolation
from meetups.core.failures import DuplicateEntity
from meetups.core.failures import EntityNotFound
from meetups.core.failures import MediaTypeNotSupported
from meetups.core.failures import MessageNotReadable
from meetups.core.failures import MethodNotSupported
from meetups.core.failures import MissingParameter
from meetups.core.failures import NoHandlerFound
from meetups.core.failures import ValueNotAllowed
from meetups.schemas.error import ApiError

INTERNAL_MESSAGE = "It's not you. It's us. We are having some problems"
INTERNAL_ERROR = "error occurred"


def _response(
    code: ApiErrorCode,
    status: HTTPStatus,
    message: str,
    errors: str | Iterable[str],
) -> tuple[int, ApiError]:
    if isinstance(errors, str):
        api_error = ApiError.single(int(code), status, message, errors)
    else:
        api_error = ApiError.of(int(code), status, message, list(errors))
    return status.value, api_error


def _invalid_arguments(names: Iterable[str]) -> str:
    return "Invalid arguments: " + " ".join(names)


def _braced(items: Iterable[Any]) -> str:
    return "{" + ", ".join(str(item) for item in items) + "}"


def method_not_supported(failure: MethodNotSupported) -> tuple[int, ApiError]:
    error = (
        f"{failure.method} method is not supported for this request. "
        f"Supported methods are {' '.join(failure.supported)}"
    )
    return _response(
        ApiErrorCode.REQUEST_METHOD_NOT_SUPPORTED,
        HTTPStatus.METHOD_NOT_ALLOWED,
        "Unsupported HTTP method",
        error,
    )


def media_type_not_supported(failure: MediaTypeNotSupported) -> tuple[int, ApiError]:
    error = (
        f"{failure.content_type} media type is not supported. "
        f"Supported media types are {', '.join(failure.supported)}"
    )
    return _response(
        ApiErrorCode.MEDIA_TYPE_NOT_SUPPORTED,
        HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
        "Unsupported media type",
        error,
    )


def argument_not_valid(failure: ArgumentNotValid) -> tuple[int, ApiError]:
    reported = [*failure.field_errors, *failure.object_errors]
    return _response(
        ApiErrorCode.METHOD_ARGUMENT_NOT_VALID,
        HTTPStatus.BAD_REQUEST,
        _invalid_arguments(item.name for item in reported),
        [f"{item.name}: {item.message}" for item in reported],
    )


def missing_parameter(failure: MissingParameter) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.MISSING_REQUEST_PARAMETER,
        HTTPStatus.BAD_REQUEST,
        "Parameter missing",
        f"{failure.name} parameter is missing",
    )


def message_not_readable(failure: MessageNotReadable) -> tuple[int, ApiError]:
    tokens = failure.cause.split()
    return _response(
        ApiErrorCode.MESSAGE_NOT_READABLE,
        HTTPStatus.BAD_REQUEST,
        "Invalid body",
        tokens[0] if tokens else "",
    )


def constraint_violation(failure: ConstraintViolation) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.CONSTRAINT_VIOLATION,
        HTTPStatus.CONFLICT,
        _invalid_arguments(item.path for item in failure.violations),
        [f"{item.path}: {item.message}" for item in failure.violations],
    )


def argument_type_mismatch(failure: ArgumentTypeMismatch) -> tuple[int, ApiError]:
    required_type = failure.required_type or "unknown"
    return _response(
        ApiErrorCode.METHOD_ARGUMENT_TYPE_MISMATCH,
        HTTPStatus.BAD_REQUEST,
        f"Invalid {failure.name}argument type",
        f"{failure.name} should be of type {required_type}",
    )


def bad_credentials(failure: BadCredentials) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.BAD_CREDENTIALS,
        HTTPStatus.UNAUTHORIZED,
        "Bad credentials",
        failure.detail,
    )


def entity_not_found(failure: EntityNotFound) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.ENTITY_NOT_FOUND,
        HTTPStatus.BAD_REQUEST,
        f"{failure.entity} was not found",
        f"{failure.entity} was not found for parameter {failure.id}",
    )


def duplicate_entity(failure: DuplicateEntity) -> tuple[int, ApiError]:
    error = f"{_braced(failure.values)} already exists. Select another {_braced(failure.unique_fields)}"
    return _response(
        ApiErrorCode.DUPLICATE_ENTITY,
        HTTPStatus.CONFLICT,
        f"{failure.entity} already exists",
        error,
    )


def value_not_allowed(failure: ValueNotAllowed) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.VALUE_NOT_ALLOWED,
        HTTPStatus.CONFLICT,
        "Value not allowed",
        f"The {failure.attribute} {{{failure.value}}} is not allowed because {failure.reason}",
    )


def no_handler_found(failure: NoHandlerFound) -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.NO_HANDLER_FOUND,
        HTTPStatus.NOT_FOUND,
        "No handler found",
        f"No handler found for {failure.method} {failure.path}",
    )


def internal_error() -> tuple[int, ApiError]:
    return _response(
        ApiErrorCode.INTERNAL,
        HTTPStatus.INTERNAL_SERVER_ERROR,
        INTERNAL_MESSAGE,
        INTERNAL_ERROR,
    )


def translate(failure: object) -> tuple[int, ApiError]:
    """Map any failure to its HTTP status and error payload.

    Unknown values, including ``Unhandled``, fall through to the internal
    error mapping; this function never raises.
    """
    match failure:
        case MethodNotSupported():
            return method_not_supported(failure)
        case MediaTypeNotSupported():
            return media_type_not_supported(failure)
        case ArgumentNotValid():
            return argument_not_valid(failure)
        case MissingParameter():
            return missing_parameter(failure)
        case MessageNotReadable():
            return message_not_readable(failure)
        case ConstraintViolation():
            return constraint_violation(failure)
        case ArgumentTypeMismatch():
            return argument_type_mismatch(failure)
        case BadCredentials():
            return bad_credentials(failure)
        case EntityNotFound():
            return entity_not_found(failure)
        case DuplicateEntity():
            return duplicate_entity(failure)
        case ValueNotAllowed():
            return value_not_allowed(failure)
        case NoHandlerFound():
            return no_handler_found(failure)
        case _:
            return internal_error()
