"""CalendarRepository protocol for calendar persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.calendar import Calendar


class CalendarRepository(Protocol):
    """Calendar repository protocol (port)."""

    async def find_by_id(self, calendar_id: UUID) -> Calendar | None:
        """Find a calendar by ID."""
        ...

    async def list_by_owner(self, owner_id: UUID) -> list[Calendar]:
        """List calendars owned by a user, newest first."""
        ...

    async def save(self, calendar: Calendar) -> None:
        """Create a calendar."""
        ...

    async def update(self, calendar: Calendar) -> None:
        """Persist changes to an existing calendar."""
        ...

    async def delete(self, calendar_id: UUID) -> bool:
        """Delete a calendar and all of its memberships.

        Returns:
            True if the calendar existed.
        """
        ...
