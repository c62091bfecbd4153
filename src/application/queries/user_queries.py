"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """View a profile (self or admin)."""

    actor_id: UUID
    actor_role: UserRole
    user_id: UUID
