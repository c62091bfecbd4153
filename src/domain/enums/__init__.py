"""Domain enums."""

from src.domain.enums.calendar_type import CalendarType
from src.domain.enums.member_role import MemberRole
from src.domain.enums.token_type import TokenType
from src.domain.enums.user_role import UserRole

__all__ = [
    "CalendarType",
    "MemberRole",
    "TokenType",
    "UserRole",
]
