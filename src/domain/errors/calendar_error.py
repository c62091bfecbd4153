"""Calendar and membership error messages."""


class CalendarErrorMessage:
    """Calendar error message constants."""

    CALENDAR_NOT_FOUND = "Calendar not found"
    USER_NOT_FOUND = "User not found"
    MEMBER_NOT_FOUND = "Member not found"
    MEMBER_ALREADY_EXISTS = "User is already a member of this calendar"
    NOT_A_MEMBER = "You are not a member of this calendar"
    CANNOT_MANAGE_MEMBERS = "Only owners and editors can manage members"
    NAME_REQUIRED = "Calendar name is required"
