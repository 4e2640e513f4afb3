"""SQLAlchemy model for meetup enrollments."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from meetups.db.models.user import Base
from meetups.db.models.user import utcnow

if TYPE_CHECKING:
    from meetups.db.models.meetup import Meetup
    from meetups.db.models.user import User


class Enrollment(Base):
    """A user's registration to attend a meetup."""

    __tablename__ = "enrollments"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_enrollments"),
        UniqueConstraint("meetup_id", "user_id", name="uq_enrollments_meetup_id_user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    meetup_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("meetups.id", name="fk_enrollments_meetup_id_meetups", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", name="fk_enrollments_user_id_users", ondelete="RESTRICT"),
        nullable=False,
    )
    checked_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    meetup: Mapped["Meetup"] = relationship("Meetup", back_populates="enrollments")
    user: Mapped["User"] = relationship("User", back_populates="enrollments")
