"""Calendar queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListCalendars:
    """Calendars owned by the caller."""

    owner_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListMembers:
    """Members of a calendar (caller must be a member)."""

    actor_id: UUID
    calendar_id: UUID
