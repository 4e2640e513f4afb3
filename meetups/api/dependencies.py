"""Request guards shared by API routers."""

from __future__ import annotations

from fastapi import Request

from meetups.core.errors import MediaTypeNotSupportedError

SUPPORTED_MEDIA_TYPES = ("application/json",)
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def require_json_body(request: Request) -> None:
    """Reject request bodies that are not sent as JSON."""
    if request.method not in _BODY_METHODS:
        return
    content_type = request.headers.get("content-type")
    if not content_type:
        return
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in SUPPORTED_MEDIA_TYPES or media_type.endswith("+json"):
        return
    raise MediaTypeNotSupportedError(media_type, SUPPORTED_MEDIA_TYPES)
