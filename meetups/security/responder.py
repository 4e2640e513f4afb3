"""Responses written directly by the security layer."""

from __future__ import annotations

from http import HTTPStatus

from fastapi.responses import JSONResponse

from meetups.core.error_codes import ApiErrorCode
from meetups.schemas.error import ApiError

UNEXPECTED_JWT_MESSAGE = "Unexpected JWT"
UNEXPECTED_JWT_ERROR = "A valid bearer token is required to access this resource"


class SecurityResponder:
    """Build the error responses the authentication layer sends on its own."""

    def unexpected_jwt(self) -> JSONResponse:
        api_error = ApiError.single(
            int(ApiErrorCode.UNEXPECTED_JWT),
            HTTPStatus.UNAUTHORIZED,
            UNEXPECTED_JWT_MESSAGE,
            UNEXPECTED_JWT_ERROR,
        )
        return JSONResponse(
            status_code=HTTPStatus.UNAUTHORIZED.value,
            content=api_error.model_dump(mode="json"),
            headers={"WWW-Authenticate": "Bearer"},
        )
