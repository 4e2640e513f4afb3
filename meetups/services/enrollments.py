"""Service helpers for enrollment and check-in operations."""

from __future__ import annotations

from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meetups.core.errors import DuplicateEntityError
from meetups.core.errors import EntityNotFoundError
from meetups.core.errors import ValueNotAllowedError
from meetups.db.models.enrollment import Enrollment
from meetups.db.repository.enrollments import create_enrollment
from meetups.db.repository.enrollments import get_enrollment
from meetups.db.repository.enrollments import mark_checked_in
from meetups.db.repository.users import get_user
from meetups.schemas.enrollment import EnrollmentCreate
from meetups.services.meetups import get_meetup_service


def create_enrollment_service(session: Session, payload: EnrollmentCreate) -> Enrollment:
    """Enroll an existing user in an existing meetup, once."""
    get_meetup_service(session, payload.meetup_id)
    if get_user(session, payload.user_id) is None:
        raise EntityNotFoundError("User", payload.user_id)
    try:
        enrollment = create_enrollment(session, meetup_id=payload.meetup_id, user_id=payload.user_id)
        session.commit()
        return enrollment
    except IntegrityError:
        session.rollback()
        raise DuplicateEntityError(
            "Enrollment",
            [payload.meetup_id, payload.user_id],
            ["meetup_id", "user_id"],
        ) from None


def check_in_service(session: Session, enrollment_id: int, *, today: date | None = None) -> Enrollment:
    """Record the attendance of an enrolled user on the meetup day."""
    enrollment = get_enrollment(session, enrollment_id)
    if enrollment is None:
        raise EntityNotFoundError("Enrollment", enrollment_id)
    if enrollment.checked_in:
        raise ValueNotAllowedError("check_in", "true", "the user is already checked in")

    today = today or date.today()
    if enrollment.meetup.day != today:
        raise ValueNotAllowedError(
            "check_in",
            enrollment.meetup.day.isoformat(),
            "the meetup does not take place today",
        )

    enrollment = mark_checked_in(session, enrollment)
    session.commit()
    return enrollment
