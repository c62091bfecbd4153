"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

Revocation is a flag update, so revoking twice is harmless.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.domain.protocols.refresh_token_repository import RefreshTokenData
from src.infrastructure.persistence.models.refresh_token import RefreshToken


def _to_data(model: RefreshToken) -> RefreshTokenData:
    """Convert database model to domain DTO."""
    return RefreshTokenData(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        expires_at=model.expires_at,
        is_revoked=model.is_revoked,
        created_at=model.created_at,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation for refresh token persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> repo = RefreshTokenRepository(session)
        >>> await repo.is_live(token_hash)
        True
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Store a newly issued refresh token."""
        model = RefreshToken(
            id=uuid7(),
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            is_revoked=False,
            created_at=datetime.now(UTC),
        )
        self.session.add(model)
        await self.session.commit()
        return _to_data(model)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find a stored token regardless of revocation or expiry."""
        stmt = select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def is_live(self, token_hash: str) -> bool:
        """True iff stored, not revoked and not expired."""
        stmt = select(RefreshToken.id).where(
            RefreshToken.token_hash == token_hash,
            RefreshToken.is_revoked.is_(False),
            RefreshToken.expires_at > datetime.now(UTC),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def revoke(self, token_hash: str) -> bool:
        """Revoke one token. Returns True if the token is known."""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token_hash == token_hash)
            .values(is_revoked=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke every live-flagged token of a user."""
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.user_id == user_id,
                RefreshToken.is_revoked.is_(False),
            )
            .values(is_revoked=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    async def delete_expired(self) -> int:
        """Remove tokens whose expiry has passed."""
        stmt = delete(RefreshToken).where(RefreshToken.expires_at <= datetime.now(UTC))
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
