"""Database models for persistence layer.

These are infrastructure concerns and are never imported by the domain
layer. Domain entities (dataclasses) live in src/domain/entities/ and are
mapped to these models by the repositories.

Importing this package registers every table on BaseModel.metadata
(used by Database.create_all and Alembic autogenerate).
"""

from src.infrastructure.persistence.models.calendar import Calendar
from src.infrastructure.persistence.models.calendar_member import CalendarMember
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Calendar",
    "CalendarMember",
    "RefreshToken",
    "User",
]
