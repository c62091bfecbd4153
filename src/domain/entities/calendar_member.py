"""CalendarMember domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass
class CalendarMember:
    """Membership of a user in a calendar.

    The (user_id, calendar_id) pair is unique.

    Attributes:
        id: Unique membership identifier
        user_id: Member user
        calendar_id: Calendar being shared
        role: Owner, editor or viewer
        joined_at: When the membership was created
    """

    id: UUID
    user_id: UUID
    calendar_id: UUID
    role: MemberRole = MemberRole.VIEWER
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def can_manage_members(self) -> bool:
        """Owners and editors may add, update and remove members."""
        return self.role.can_manage_members
