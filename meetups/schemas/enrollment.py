"""Pydantic schemas for enrollment API payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class EnrollmentCreate(BaseModel):
    """Payload to enroll a user in a meetup."""

    meetup_id: int = Field(gt=0)
    user_id: int = Field(gt=0)


class Enrollment(BaseModel):
    """Enrollment response payload."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    meetup_id: int
    user_id: int
    checked_in: bool
    created_at: datetime
