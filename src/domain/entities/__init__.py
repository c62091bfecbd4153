"""Domain entities."""

from src.domain.entities.calendar import Calendar
from src.domain.entities.calendar_member import CalendarMember
from src.domain.entities.user import NotificationPreferences, User, UserPreferences

__all__ = [
    "Calendar",
    "CalendarMember",
    "NotificationPreferences",
    "User",
    "UserPreferences",
]
