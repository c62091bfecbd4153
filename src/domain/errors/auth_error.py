"""Authentication and account-security error messages.

Message constants shared by handlers, guards and auth dependencies so that
clients always see the same wording for the same condition.

Generic messages:
    Code failures never reveal whether the code was wrong, expired or never
    requested. Credential failures never reveal whether the email exists.
"""


class AuthErrorMessage:
    """Authentication error message constants.

    These are NOT exceptions. They are message values placed inside
    ApplicationError or HTTPException details.
    """

    # Registration
    EMAIL_ALREADY_REGISTERED = "Email is already registered"
    REGISTRATION_SUCCESSFUL = "Registration successful. Please verify your email."

    # Login
    INVALID_CREDENTIALS = "Invalid credentials"
    ACCOUNT_DEACTIVATED = "Account is deactivated"
    EMAIL_NOT_VERIFIED = "Please verify your email before logging in"
    ACCOUNT_LOCKED = "Account locked. Try again in {minutes} minutes"

    # One-time codes
    INVALID_VERIFICATION_CODE = "Invalid or expired verification code"
    INVALID_RESET_CODE = "Invalid or expired reset code"
    INVALID_CHANGE_CODE = "Invalid or expired password change code"
    EMAIL_ALREADY_VERIFIED = "Email is already verified"

    # Password changes
    PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
    PASSWORD_REUSED = "Cannot use current password"
    CURRENT_PASSWORD_INCORRECT = "Current password is incorrect"
    RESET_COOLDOWN = "Password reset limited to once every 24 hours"

    # Tokens
    INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
    NOT_AUTHENTICATED = "Not authenticated"
    INVALID_ACCESS_TOKEN = "Invalid or expired token"
    TOKEN_EXPIRED = "Token has expired"

    # Authorization
    INSUFFICIENT_PERMISSIONS = "Insufficient permissions"

    # Email transport
    EMAIL_SERVICE_ERROR = (
        "Email service error: {reason}. Please try again later or contact support."
    )

    @classmethod
    def account_locked(cls, minutes: int) -> str:
        """Lock message carrying the remaining minutes."""
        return cls.ACCOUNT_LOCKED.format(minutes=minutes)

    @classmethod
    def email_service_error(cls, reason: str) -> str:
        """Delivery failure message surfaced to the caller."""
        return cls.EMAIL_SERVICE_ERROR.format(reason=reason)
