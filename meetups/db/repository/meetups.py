"""Repository primitives for meetup entities."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from meetups.db.models.enrollment import Enrollment
from meetups.db.models.meetup import Meetup


def create_meetup(
    session: Session,
    *,
    owner_id: int,
    day: date,
    description: str | None = None,
) -> Meetup:
    """Create and return a meetup row."""
    meetup = Meetup(owner_id=owner_id, day=day, description=description)
    session.add(meetup)
    session.flush()
    session.refresh(meetup)
    return meetup


def get_meetup(session: Session, meetup_id: int) -> Meetup | None:
    """Fetch a meetup by id."""
    return session.get(Meetup, meetup_id)


def list_meetups_by_owner(session: Session, owner_id: int) -> list[Meetup]:
    """List meetups created by a user, soonest first."""
    stmt = select(Meetup).where(Meetup.owner_id == owner_id).order_by(Meetup.day.asc(), Meetup.id.asc())
    return list(session.scalars(stmt))


def list_meetups_by_attendee(session: Session, user_id: int) -> list[Meetup]:
    """List meetups a user is enrolled in, soonest first."""
    stmt = (
        select(Meetup)
        .join(Enrollment, Enrollment.meetup_id == Meetup.id)
        .where(Enrollment.user_id == user_id)
        .order_by(Meetup.day.asc(), Meetup.id.asc())
    )
    return list(session.scalars(stmt))
