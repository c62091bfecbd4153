"""Admin user creation handler.

Admin-created accounts skip email verification. The caller's admin role is
enforced by the router through require_role.
"""

from uuid_extensions import uuid7

from src.application.commands.user_commands import CreateUser
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.core.validation import validate_email, validate_name, validate_password_length
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    DuplicateEmailError,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)

INVALID_ROLE_MESSAGE = "Invalid role provided"


class CreateUserHandler:
    """Creates a pre-verified user with an optional role."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[User, ApplicationError]:
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

        match validate_password_length(cmd.password):
            case Failure(error=error):
                return Failure(error=ApplicationError.from_domain(error))

        try:
            role = UserRole(cmd.role)
        except ValueError:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.VALIDATION_ERROR,
                    message=INVALID_ROLE_MESSAGE,
                    details={"field": "role"},
                )
            )

        if await self._user_repo.exists_by_email(email):
            return _email_taken()

        user = User(
            id=uuid7(),
            email=email,
            name=name,
            password_hash=self._password_service.hash_password(cmd.password),
            role=role,
            is_email_verified=True,
        )
        try:
            await self._user_repo.save(user)
        except DuplicateEmailError:
            return _email_taken()

        self._logger.info("user_created", user_id=str(user.id), role=role.value)
        return Success(value=user)


def _email_taken() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message=AuthErrorMessage.EMAIL_ALREADY_REGISTERED,
            details={"field": "email"},
        )
    )
