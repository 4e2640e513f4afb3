"""Stable internal error codes exposed in the ``code`` field of API errors."""

from __future__ import annotations

from enum import IntEnum


class ApiErrorCode(IntEnum):
    INTERNAL = 1000
    REQUEST_METHOD_NOT_SUPPORTED = 1001
    MEDIA_TYPE_NOT_SUPPORTED = 1002
    METHOD_ARGUMENT_NOT_VALID = 1003
    MISSING_REQUEST_PARAMETER = 1004
    MESSAGE_NOT_READABLE = 1005
    CONSTRAINT_VIOLATION = 1006
    METHOD_ARGUMENT_TYPE_MISMATCH = 1007
    BAD_CREDENTIALS = 1008
    ENTITY_NOT_FOUND = 1009
    DUPLICATE_ENTITY = 1010
    VALUE_NOT_ALLOWED = 1011
    NO_HANDLER_FOUND = 1012

    # Written by the security responder, outside the translator.
    UNEXPECTED_JWT = 2001
