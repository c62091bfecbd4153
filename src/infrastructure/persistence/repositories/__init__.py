"""Repository implementations (adapters for hexagonal architecture)."""

from src.infrastructure.persistence.repositories.calendar_repository import (
    CalendarRepository,
)
from src.infrastructure.persistence.repositories.member_repository import (
    MemberRepository,
)
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CalendarRepository",
    "MemberRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
