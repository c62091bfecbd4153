"""RefreshTokenRepository protocol (port) for domain layer.

Refresh tokens are persisted so they can be revoked. Only a SHA-256
fingerprint of the signed token is stored, never the token itself.

Token Lifecycle:
    1. Created at login
    2. Checked on every refresh (must exist, not revoked, not expired)
    3. Revoked on logout (one token) or logout-all (every token of a user)
    4. Expired rows are removed by delete_expired()
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class RefreshTokenData:
    """Stored refresh token, without exposing the ORM model.

    A token is live iff ``is_revoked`` is False and ``expires_at`` is in the
    future.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    is_revoked: bool
    created_at: datetime


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations."""

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Store a newly issued refresh token.

        Args:
            user_id: Owner of the token.
            token_hash: SHA-256 fingerprint of the signed token.
            expires_at: Same instant as the token's ``exp`` claim.
        """
        ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find a stored token regardless of its revocation or expiry state."""
        ...

    async def is_live(self, token_hash: str) -> bool:
        """True iff the token exists, is not revoked and has not expired."""
        ...

    async def revoke(self, token_hash: str) -> bool:
        """Revoke one token. Idempotent.

        Returns:
            True if a matching row exists (revoked now or already).
        """
        ...

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke every non-revoked token of a user. Idempotent.

        Returns:
            Number of tokens newly revoked.
        """
        ...

    async def delete_expired(self) -> int:
        """Remove expired tokens.

        Returns:
            Number of rows deleted.
        """
        ...
