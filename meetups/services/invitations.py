"""Service helpers for sending meetup invitations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from meetups.core.errors import DuplicateEntityError
from meetups.core.errors import EntityNotFoundError
from meetups.core.errors import MeetupsError
from meetups.core.errors import ValueNotAllowedError
from meetups.db.models.invitation import Invitation
from meetups.db.models.meetup import Meetup
from meetups.db.repository.invitations import create_invitation
from meetups.db.repository.invitations import get_invitation_by_pair
from meetups.db.repository.users import get_user
from meetups.schemas.invitation import Invitation as InvitationResponse
from meetups.services.meetups import get_meetup_service


def _duplicate(meetup_id: int, user_id: int) -> DuplicateEntityError:
    return DuplicateEntityError("Invitation", [meetup_id, user_id], ["meetup_id", "user_id"])


def _to_response(invitation: Invitation, meetup: Meetup) -> InvitationResponse:
    return InvitationResponse(
        id=invitation.id,
        user_id=invitation.user_id,
        meetup_id=meetup.id,
        meetup_owner_name=meetup.owner.name,
        meetup_owner_email=meetup.owner.email,
        meetup_day=meetup.day,
        status=invitation.status,
    )


def _invite(session: Session, meetup: Meetup, user_id: int) -> Invitation:
    if get_user(session, user_id) is None:
        raise EntityNotFoundError("User", user_id)
    if user_id == meetup.owner_id:
        raise ValueNotAllowedError("user_id", user_id, "the user is the meetup owner")
    if get_invitation_by_pair(session, meetup_id=meetup.id, user_id=user_id) is not None:
        raise _duplicate(meetup.id, user_id)
    return create_invitation(session, meetup_id=meetup.id, user_id=user_id)


def create_invitations_service(
    session: Session,
    meetup_id: int,
    user_ids: Sequence[int],
) -> list[InvitationResponse]:
    """Invite every given user to a meetup; nothing is stored if one fails."""
    meetup = get_meetup_service(session, meetup_id)
    try:
        invitations = [_invite(session, meetup, user_id) for user_id in user_ids]
        session.commit()
    except MeetupsError:
        session.rollback()
        raise
    except IntegrityError:
        session.rollback()
        raise _duplicate(meetup_id, user_ids[0]) from None
    return [_to_response(invitation, meetup) for invitation in invitations]
