"""Email verification handler.

A code that is not six digits is rejected as malformed. Past that point
every rejection returns the same message so callers cannot tell a wrong
code from an expired one, a missing one or an unknown email.
"""

from src.application.commands.auth_commands import VerifyEmail
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_code_format, validate_email
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import LoggerProtocol, OneTimeCodeProtocol, UserRepository


class VerifyEmailHandler:
    """Consumes the email verification code and marks the email verified."""

    def __init__(
        self,
        user_repo: UserRepository,
        code_service: OneTimeCodeProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._code_service = code_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[User, ApplicationError]:
        """Handle email verification.

        Returns:
            Success(User) now verified, or Failure(VALIDATION_ERROR).
        """
        invalid = Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.VALIDATION_ERROR,
                message=AuthErrorMessage.INVALID_VERIFICATION_CODE,
            )
        )

        match validate_email(cmd.email):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))
            case Success(value=email):
                pass

        match validate_code_format(cmd.code):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        user = await self._user_repo.find_by_email(email)
        if user is None or user.is_email_verified:
            return invalid

        if not user.email_verification_code_matches(self._code_service.hash_code(cmd.code)):
            self._logger.info("email_verification_rejected", user_id=str(user.id))
            return invalid

        user.mark_email_verified()
        await self._user_repo.update(user)

        self._logger.info("email_verified", user_id=str(user.id))
        return Success(value=user)
