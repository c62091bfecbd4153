"""Calendar database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Calendar(BaseMutableModel):
    """Calendar owned by a user. Deleted with its owner."""

    __tablename__ = "calendars"

    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="personal",
        comment="personal or group",
    )
