"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and the database User model.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import (
    DEFAULT_TIMEZONE,
    NotificationPreferences,
    User,
    UserPreferences,
)
from src.domain.enums import UserRole
from src.domain.protocols.user_repository import DuplicateEmailError
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the UserRepository protocol (structural
    typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("ada@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        user_model = await self.session.get(UserModel, user_id)
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive exact match)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(self, email: str) -> bool:
        """Check if user with email exists (case-insensitive)."""
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> None:
        """Create new user in database.

        Raises:
            DuplicateEmailError: If email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self._commit_or_conflict(user.email)

    async def update(self, user: User) -> None:
        """Update existing user in database.

        Raises:
            NoResultFound: If user doesn't exist.
            DuplicateEmailError: If the new email belongs to another user.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.name = user.name
        user_model.password_hash = user.password_hash
        user_model.role = user.role.value
        user_model.is_active = user.is_active
        user_model.is_email_verified = user.is_email_verified
        user_model.failed_login_attempts = user.failed_login_attempts
        user_model.lock_until = user.lock_until
        user_model.email_verification_code = user.email_verification_code
        user_model.email_verification_code_expiry = user.email_verification_code_expiry
        user_model.two_factor_code = user.two_factor_code
        user_model.two_factor_code_expiry = user.two_factor_code_expiry
        user_model.pending_password_hash = user.pending_password_hash
        user_model.last_password_reset_at = user.last_password_reset_at
        user_model.last_login = user.last_login
        user_model.preferences = _preferences_to_dict(user.preferences)
        user_model.updated_at = user.updated_at

        await self._commit_or_conflict(user.email)

    async def delete(self, user_id: UUID) -> bool:
        """Hard delete a user. Tokens, calendars and memberships cascade."""
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def _commit_or_conflict(self, email: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEmailError(email) from e

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            password_hash=user_model.password_hash,
            role=UserRole(user_model.role),
            is_active=user_model.is_active,
            is_email_verified=user_model.is_email_verified,
            failed_login_attempts=user_model.failed_login_attempts,
            lock_until=user_model.lock_until,
            email_verification_code=user_model.email_verification_code,
            email_verification_code_expiry=user_model.email_verification_code_expiry,
            two_factor_code=user_model.two_factor_code,
            two_factor_code_expiry=user_model.two_factor_code_expiry,
            pending_password_hash=user_model.pending_password_hash,
            last_password_reset_at=user_model.last_password_reset_at,
            last_login=user_model.last_login,
            preferences=_preferences_from_dict(user_model.preferences or {}),
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            role=user.role.value,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            failed_login_attempts=user.failed_login_attempts,
            lock_until=user.lock_until,
            email_verification_code=user.email_verification_code,
            email_verification_code_expiry=user.email_verification_code_expiry,
            two_factor_code=user.two_factor_code,
            two_factor_code_expiry=user.two_factor_code_expiry,
            pending_password_hash=user.pending_password_hash,
            last_password_reset_at=user.last_password_reset_at,
            last_login=user.last_login,
            preferences=_preferences_to_dict(user.preferences),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def _preferences_to_dict(preferences: UserPreferences) -> dict[str, Any]:
    return {
        "timezone": preferences.timezone,
        "notifications": {
            "email": preferences.notifications.email,
            "sms": preferences.notifications.sms,
            "push": preferences.notifications.push,
        },
    }


def _preferences_from_dict(data: dict[str, Any]) -> UserPreferences:
    notifications = data.get("notifications") or {}
    return UserPreferences(
        timezone=data.get("timezone", DEFAULT_TIMEZONE),
        notifications=NotificationPreferences(
            email=notifications.get("email", True),
            sms=notifications.get("sms", False),
            push=notifications.get("push", True),
        ),
    )
