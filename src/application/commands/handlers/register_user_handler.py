"""Registration handler.

Flow:
1. Validate name, email format and password policy
2. Check email uniqueness (the unique index catches a concurrent duplicate)
3. Hash password and create the unverified User
4. Generate a verification code and store its hash
5. Save the user
6. Send the verification email (best effort)
7. Return Success(user)

A failed send does NOT abort registration: the user can request a new code
through resend-verification.

Architecture:
- Application layer ONLY imports from domain and core
- Repositories and services are injected via protocols
"""

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_email, validate_name, validate_password_policy
from src.domain.entities.user import User
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    OneTimeCodeProtocol,
    DuplicateEmailError,
    PasswordHashingProtocol,
    UserRepository,
)


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        code_service: OneTimeCodeProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            code_service: One-time code generator.
            email_service: Outbound email.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._code_service = code_service
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[User, ApplicationError]:
        """Handle user registration command.

        Returns:
            Success(User) with is_email_verified=False.
            Failure(ApplicationError) with VALIDATION_ERROR or CONFLICT.
        """
        match validate_name(cmd.name):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))
            case Success(value=name):
                pass

        match validate_email(cmd.email):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))
            case Success(value=email):
                pass

        match validate_password_policy(cmd.password):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        if await self._user_repo.exists_by_email(email):
            self._logger.info("registration_rejected", reason="email_exists")
            return _email_taken()

        user = User(
            id=uuid7(),
            email=email,
            name=name,
            password_hash=self._password_service.hash_password(cmd.password),
        )

        code = self._code_service.generate_code()
        user.set_email_verification_code(
            self._code_service.hash_code(code),
            self._code_service.expiry_from_now(),
        )

        try:
            await self._user_repo.save(user)
        except DuplicateEmailError:
            self._logger.info("registration_rejected", reason="email_exists_on_save")
            return _email_taken()
        self._logger.info("user_registered", user_id=str(user.id))

        match await self._email_service.send_verification_code(user.email, user.name, code):
            case Failure(error=error):
                self._logger.warning(
                    "verification_email_failed",
                    user_id=str(user.id),
                    reason=error.message,
                )

        return Success(value=user)


def _email_taken() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message=AuthErrorMessage.EMAIL_ALREADY_REGISTERED,
            details={"field": "email"},
        )
    )
