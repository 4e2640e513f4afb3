"""Meetup API routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from sqlalchemy.orm import Session

from meetups.api.dependencies import require_json_body
from meetups.db.base import get_db_session
from meetups.schemas.invitation import Invitation
from meetups.schemas.meetup import Meetup
from meetups.schemas.meetup import MeetupCreate
from meetups.security.entry_point import BearerProtectedRoute
from meetups.services.invitations import create_invitations_service
from meetups.services.meetups import create_meetup_service
from meetups.services.meetups import list_created_meetups_service
from meetups.services.meetups import list_enrolled_meetups_service

router = APIRouter(
    prefix="/meetups",
    tags=["meetups"],
    dependencies=[Depends(require_json_body)],
    route_class=BearerProtectedRoute,
)


@router.post("", response_model=Meetup, status_code=201)
def create_meetup_endpoint(
    payload: MeetupCreate,
    session: Session = Depends(get_db_session),
) -> Meetup:
    """Create a meetup."""
    return create_meetup_service(session, payload)


@router.post("/{meetup_id}/invitations", response_model=list[Invitation], status_code=201)
def create_invitations_endpoint(
    meetup_id: int,
    user_ids: list[int],
    session: Session = Depends(get_db_session),
) -> list[Invitation]:
    """Invite a list of users to a meetup."""
    return create_invitations_service(session, meetup_id, user_ids)


@router.get("/created", response_model=list[Meetup])
def list_created_meetups_endpoint(
    owner_id: int = Query(...),
    session: Session = Depends(get_db_session),
) -> list[Meetup]:
    """List the meetups created by a user."""
    return list_created_meetups_service(session, owner_id)


@router.get("/enrolled", response_model=list[Meetup])
def list_enrolled_meetups_endpoint(
    user_id: int = Query(...),
    session: Session = Depends(get_db_session),
) -> list[Meetup]:
    """List the meetups a user is enrolled in."""
    return list_enrolled_meetups_service(session, user_id)
