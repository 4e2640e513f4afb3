"""Model module imports for SQLAlchemy relationship registration."""

from meetups.db.models.enrollment import Enrollment
from meetups.db.models.invitation import Invitation
from meetups.db.models.invitation import InvitationStatusEnum
from meetups.db.models.meetup import Meetup
from meetups.db.models.user import Base
from meetups.db.models.user import User

__all__ = [
    "Base",
    "Enrollment",
    "Invitation",
    "InvitationStatusEnum",
    "Meetup",
    "User",
]
