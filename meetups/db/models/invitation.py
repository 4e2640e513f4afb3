"""SQLAlchemy model for meetup invitations."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from meetups.db.models.user import Base
from meetups.db.models.user import utcnow


class InvitationStatusEnum(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


if TYPE_CHECKING:
    from meetups.db.models.meetup import Meetup
    from meetups.db.models.user import User


class Invitation(Base):
    """An invitation sent by a meetup owner to another user."""

    __tablename__ = "invitations"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_invitations"),
        UniqueConstraint("meetup_id", "user_id", name="uq_invitations_meetup_id_user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    meetup_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("meetups.id", name="fk_invitations_meetup_id_meetups", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", name="fk_invitations_user_id_users", ondelete="RESTRICT"),
        nullable=False,
    )
    status: Mapped[InvitationStatusEnum] = mapped_column(
        SAEnum(
            InvitationStatusEnum,
            name="invitation_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=InvitationStatusEnum.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    meetup: Mapped["Meetup"] = relationship("Meetup", back_populates="invitations")
    user: Mapped["User"] = relationship("User")
