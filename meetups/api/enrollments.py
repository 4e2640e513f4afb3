"""Enrollment API routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response
from sqlalchemy.orm import Session

from meetups.api.dependencies import require_json_body
from meetups.db.base import get_db_session
from meetups.schemas.enrollment import Enrollment
from meetups.schemas.enrollment import EnrollmentCreate
from meetups.security.entry_point import BearerProtectedRoute
from meetups.services.enrollments import check_in_service
from meetups.services.enrollments import create_enrollment_service

router = APIRouter(
    prefix="/enrollments",
    tags=["enrollments"],
    dependencies=[Depends(require_json_body)],
    route_class=BearerProtectedRoute,
)


@router.post("", response_model=Enrollment, status_code=201)
def create_enrollment_endpoint(
    payload: EnrollmentCreate,
    session: Session = Depends(get_db_session),
) -> Enrollment:
    """Enroll a user in a meetup."""
    return create_enrollment_service(session, payload)


@router.patch("/{enrollment_id}/check-in", status_code=204)
def check_in_endpoint(
    enrollment_id: int,
    session: Session = Depends(get_db_session),
) -> Response:
    """Check in the user of an enrollment."""
    check_in_service(session, enrollment_id)
    return Response(status_code=204)
