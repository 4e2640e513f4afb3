"""SQLAlchemy model for meetups."""

from __future__ import annotations

from datetime import date
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date
from sqlalchemy import DateTime
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import Text
from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from meetups.db.models.user import Base
from meetups.db.models.user import utcnow

if TYPE_CHECKING:
    from meetups.db.models.enrollment import Enrollment
    from meetups.db.models.invitation import Invitation
    from meetups.db.models.user import User


class Meetup(Base):
    """A meetup organised by one owner on a given day."""

    __tablename__ = "meetups"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_meetups"),
        UniqueConstraint("owner_id", "day", name="uq_meetups_owner_id_day"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", name="fk_meetups_owner_id_users", ondelete="RESTRICT"),
        nullable=False,
    )
    day: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    owner: Mapped["User"] = relationship("User", back_populates="meetups")
    enrollments: Mapped[list["Enrollment"]] = relationship("Enrollment", back_populates="meetup")
    invitations: Mapped[list["Invitation"]] = relationship("Invitation", back_populates="meetup")
