"""Calendar membership database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class CalendarMember(BaseModel):
    """Membership of a user in a calendar.

    created_at doubles as the join timestamp.
    """

    __tablename__ = "calendar_members"
    __table_args__ = (
        UniqueConstraint("user_id", "calendar_id", name="uq_calendar_members_user_calendar"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    calendar_id: Mapped[UUID] = mapped_column(
        ForeignKey("calendars.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="viewer",
        comment="owner, editor or viewer",
    )
