"""Pydantic schemas for invitation API payloads."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from meetups.db.models.invitation import InvitationStatusEnum


class Invitation(BaseModel):
    """Invitation response payload with the meetup details a guest needs."""

    id: int
    user_id: int
    meetup_id: int
    meetup_owner_name: str
    meetup_owner_email: str
    meetup_day: date
    status: InvitationStatusEnum
