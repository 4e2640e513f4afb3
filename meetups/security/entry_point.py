"""Bearer token authentication and its entry point.

Authentication failures raised here never reach the error translator: the
entry point hands them to the ``SecurityResponder``, which writes the response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Coroutine
from typing import Any

from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError
from jose import jwt

from meetups.core.config import Settings
from meetups.core.config import get_settings
from meetups.security.responder import SecurityResponder

logger = logging.getLogger(__name__)

CLAIMS_STATE_KEY = "token_claims"


class AuthenticationRequiredError(Exception):
    """Raised when a request lacks a usable bearer token."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """Decode and verify a signed bearer token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise AuthenticationRequiredError(f"Invalid token: {exc!s}") from exc


def authenticate(request: Request, settings: Settings) -> dict[str, Any]:
    """Verify the request's bearer token and remember its claims on the request."""
    authorization = request.headers.get("Authorization")
    scheme, token = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "bearer" or not token:
        raise AuthenticationRequiredError("Missing bearer token")
    claims = decode_token(token, settings)
    setattr(request.state, CLAIMS_STATE_KEY, claims)
    return claims


def bearer_principal(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Return the verified token claims of the current request."""
    claims = getattr(request.state, CLAIMS_STATE_KEY, None)
    if claims is not None:
        return claims
    return authenticate(request, settings)


class BearerProtectedRoute(APIRoute):
    """Route that rejects unauthenticated requests before reading the body."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def authenticated_route_handler(request: Request) -> Response:
            authenticate(request, get_settings())
            return await route_handler(request)

        return authenticated_route_handler


class JwtAuthenticationEntryPoint:
    """Answer requests that failed authentication before reaching a route."""

    def __init__(self, security_responder: SecurityResponder) -> None:
        self._security_responder = security_responder

    async def commence(self, request: Request, exc: AuthenticationRequiredError) -> JSONResponse:
        logger.info("Authentication rejected on %s: %s", request.url.path, exc.reason)
        return self._security_responder.unexpected_jwt()


def register_authentication_entry_point(
    app: FastAPI,
    entry_point: JwtAuthenticationEntryPoint | None = None,
) -> None:
    """Route authentication failures to the entry point."""
    entry_point = entry_point or JwtAuthenticationEntryPoint(SecurityResponder())
    app.add_exception_handler(AuthenticationRequiredError, entry_point.commence)
