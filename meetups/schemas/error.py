"""Error envelope schema shared by every API error response."""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus

from pydantic import BaseModel
from pydantic import ConfigDict


class ApiError(BaseModel):
    """Uniform error payload returned to HTTP callers."""

    model_config = ConfigDict(frozen=True)

    code: int
    status: str
    message: str
    errors: list[str]

    @classmethod
    def of(cls, code: int, status: HTTPStatus, message: str, errors: Sequence[str]) -> ApiError:
        """Build an error carrying several detail entries, kept as given."""
        return cls(code=code, status=status.name, message=message, errors=list(errors))

    @classmethod
    def single(cls, code: int, status: HTTPStatus, message: str, error: str) -> ApiError:
        """Build an error carrying one detail entry, trimmed."""
        return cls(code=code, status=status.name, message=message, errors=[error.strip()])
