"""Declarative base and shared column types for the ORM models.

Models are an infrastructure detail. Domain entities never inherit from
them; repositories translate between the two.

    BaseModel           id (UUIDv7), created_at
    BaseMutableModel    + updated_at
        User, Calendar
    BaseModel only
        RefreshToken, CalendarMember
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Dialect, TypeDecorator, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """Timestamp column that is always timezone-aware UTC in Python.

    SQLite drops the offset on storage, so naive values read back are
    tagged as UTC rather than compared against aware lock/expiry times.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        return _as_utc(value)

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        return _as_utc(value)


class BaseModel(DeclarativeBase):
    """Root of every table: UUIDv7 primary key and creation time."""

    __abstract__ = True

    type_annotation_map = {
        datetime: UTCDateTime,
    }

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Rows that are edited after creation also track updated_at."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
