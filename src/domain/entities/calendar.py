"""Calendar domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import CalendarType


@dataclass
class Calendar:
    """A calendar owned by one user and shared through memberships.

    Business Rules:
        - Only the owner may rename, retype or delete the calendar
        - Deleting a calendar deletes all of its memberships

    Attributes:
        id: Unique calendar identifier
        owner_id: User who created the calendar
        name: Display name
        type: Personal or group calendar
        description: Optional free text
        created_at: Creation timestamp
        updated_at: Last modification timestamp
    """

    id: UUID
    owner_id: UUID
    name: str
    type: CalendarType = CalendarType.PERSONAL
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_owned_by(self, user_id: UUID) -> bool:
        """True if the given user owns this calendar."""
        return self.owner_id == user_id

    def update_details(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        type: CalendarType | None = None,
    ) -> None:
        """Apply a partial update. None leaves a field unchanged."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if type is not None:
            self.type = type
        self.updated_at = datetime.now(UTC)
