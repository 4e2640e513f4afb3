"""Repository primitives for enrollment entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from meetups.db.models.enrollment import Enrollment


def create_enrollment(session: Session, *, meetup_id: int, user_id: int) -> Enrollment:
    """Create and return an enrollment row."""
    enrollment = Enrollment(meetup_id=meetup_id, user_id=user_id, checked_in=False)
    session.add(enrollment)
    session.flush()
    session.refresh(enrollment)
    return enrollment


def get_enrollment(session: Session, enrollment_id: int) -> Enrollment | None:
    """Fetch an enrollment by id."""
    return session.get(Enrollment, enrollment_id)


def mark_checked_in(session: Session, enrollment: Enrollment) -> Enrollment:
    """Flag the enrolled user as present."""
    enrollment.checked_in = True
    session.flush()
    session.refresh(enrollment)
    return enrollment
