"""Pydantic schemas for meetup API payloads."""

from __future__ import annotations

from datetime import date
from datetime import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class MeetupCreate(BaseModel):
    """Payload to create a meetup."""

    owner_id: int = Field(gt=0)
    day: date
    description: str | None = Field(default=None, max_length=500)


class Meetup(BaseModel):
    """Meetup response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    day: date
    description: str | None = None
    created_at: datetime
