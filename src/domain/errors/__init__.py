"""Domain error message constants.

Usage:
    from src.domain.errors import AuthErrorMessage

    return Failure(error=ApplicationError(
        code=ApplicationErrorCode.AUTHENTICATION_ERROR,
        message=AuthErrorMessage.INVALID_CREDENTIALS,
    ))
"""

from src.domain.errors.auth_error import AuthErrorMessage
from src.domain.errors.calendar_error import CalendarErrorMessage

__all__ = ["AuthErrorMessage", "CalendarErrorMessage"]
