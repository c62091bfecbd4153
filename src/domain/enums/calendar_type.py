"""Calendar kinds."""

from enum import Enum


class CalendarType(str, Enum):
    """Whether a calendar belongs to one person or is shared by a group."""

    PERSONAL = "personal"
    GROUP = "group"
