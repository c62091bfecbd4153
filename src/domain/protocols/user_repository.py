"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class DuplicateEmailError(Exception):
    """Raised by save/update when the unique email index rejects the row.

    Covers the race between a duplicate check and the write. Handlers map
    it to a 409 conflict.
    """

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already exists: {email}")
        self.email = email


class UserRepository(Protocol):
    """User repository protocol (port).

    Emails are stored lowercase and looked up case-insensitively. The store
    enforces a unique index on email.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email
        exists_by_email: Duplicate check before creation
        save: Create new user
        update: Persist mutations of an existing user
        delete: Hard delete (refresh tokens and memberships cascade)
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists (case-insensitive)."""
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Raises:
            DuplicateEmailError: If the email already exists.
        """
        ...

    async def update(self, user: User) -> None:
        """Persist all mutable fields of an existing user.

        Raises:
            DuplicateEmailError: If the new email belongs to another user.

        Example:
            >>> user.register_failed_login()
            >>> await repo.update(user)
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user.

        Returns:
            True if a row was deleted, False if the user did not exist.
        """
        ...
