"""Service helpers for meetup API operations."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meetups.core.errors import DuplicateEntityError
from meetups.core.errors import EntityNotFoundError
from meetups.db.models.meetup import Meetup
from meetups.db.repository.meetups import create_meetup
from meetups.db.repository.meetups import get_meetup
from meetups.db.repository.meetups import list_meetups_by_attendee
from meetups.db.repository.meetups import list_meetups_by_owner
from meetups.db.repository.users import get_user
from meetups.schemas.meetup import MeetupCreate


def create_meetup_service(session: Session, payload: MeetupCreate) -> Meetup:
    """Create a meetup for an existing owner, one per owner and day."""
    if get_user(session, payload.owner_id) is None:
        raise EntityNotFoundError("User", payload.owner_id)
    try:
        meetup = create_meetup(
            session,
            owner_id=payload.owner_id,
            day=payload.day,
            description=payload.description,
        )
        session.commit()
        return meetup
    except IntegrityError:
        session.rollback()
        raise DuplicateEntityError(
            "Meetup",
            [payload.owner_id, payload.day.isoformat()],
            ["owner_id", "day"],
        ) from None


def get_meetup_service(session: Session, meetup_id: int) -> Meetup:
    """Fetch a meetup or raise not found."""
    meetup = get_meetup(session, meetup_id)
    if meetup is None:
        raise EntityNotFoundError("Meetup", meetup_id)
    return meetup


def list_created_meetups_service(session: Session, owner_id: int) -> list[Meetup]:
    return list_meetups_by_owner(session, owner_id)


def list_enrolled_meetups_service(session: Session, user_id: int) -> list[Meetup]:
    return list_meetups_by_attendee(session, user_id)
