"""Calendar and membership commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateCalendar:
    """Create a calendar owned by the caller."""

    owner_id: UUID
    name: str
    type: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateCalendar:
    """Owner-only partial update."""

    owner_id: UUID
    calendar_id: UUID
    name: str | None = None
    description: str | None = None
    type: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCalendar:
    """Owner-only delete (memberships go with it)."""

    owner_id: UUID
    calendar_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddMember:
    """Add a user to a calendar (caller must be owner or editor)."""

    actor_id: UUID
    calendar_id: UUID
    user_id: UUID
    role: str


@dataclass(frozen=True, kw_only=True)
class UpdateMemberRole:
    """Change a member's role (caller must be owner or editor)."""

    actor_id: UUID
    calendar_id: UUID
    member_id: UUID
    role: str


@dataclass(frozen=True, kw_only=True)
class RemoveMember:
    """Remove a member (owner/editor, or the member themself)."""

    actor_id: UUID
    calendar_id: UUID
    member_id: UUID
