"""MemberRepository protocol for calendar membership persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.calendar_member import CalendarMember


class MemberRepository(Protocol):
    """Calendar membership repository protocol (port).

    The store enforces uniqueness of (user_id, calendar_id).
    """

    async def find_by_id(self, member_id: UUID) -> CalendarMember | None:
        """Find a membership by ID."""
        ...

    async def find_by_user_and_calendar(
        self, user_id: UUID, calendar_id: UUID
    ) -> CalendarMember | None:
        """Find the membership of one user in one calendar."""
        ...

    async def list_by_calendar(self, calendar_id: UUID) -> list[CalendarMember]:
        """List members of a calendar in join order."""
        ...

    async def save(self, member: CalendarMember) -> None:
        """Create a membership."""
        ...

    async def update(self, member: CalendarMember) -> None:
        """Persist a role change."""
        ...

    async def delete(self, member_id: UUID) -> bool:
        """Delete a membership. Returns True if it existed."""
        ...
