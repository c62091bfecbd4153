"""Calendar membership roles.

Roles:
    - owner: Created the calendar, full control of its members
    - editor: May add members and change their roles
    - viewer: Read-only access
"""

from enum import Enum


class MemberRole(str, Enum):
    """Role of a user within a single calendar."""

    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"

    @property
    def can_manage_members(self) -> bool:
        """Owners and editors may add, re-role and remove members."""
        return self in (MemberRole.OWNER, MemberRole.EDITOR)
