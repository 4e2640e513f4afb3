"""Repository primitives for invitation entities."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from meetups.db.models.invitation import Invitation


def create_invitation(session: Session, *, meetup_id: int, user_id: int) -> Invitation:
    """Create and return a pending invitation row."""
    invitation = Invitation(meetup_id=meetup_id, user_id=user_id)
    session.add(invitation)
    session.flush()
    session.refresh(invitation)
    return invitation


def get_invitation_by_pair(session: Session, *, meetup_id: int, user_id: int) -> Invitation | None:
    """Fetch the invitation of a user to a meetup, if any."""
    stmt = select(Invitation).where(Invitation.meetup_id == meetup_id).where(Invitation.user_id == user_id)
    return session.scalars(stmt).first()
