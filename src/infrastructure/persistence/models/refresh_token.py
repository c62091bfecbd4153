"""Refresh token database model.

Only the SHA-256 fingerprint of a signed refresh token is stored. A token is
live iff is_revoked is False and expires_at is in the future.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class RefreshToken(BaseModel):
    """Refresh token model for the JWT refresh flow.

    Fields:
        id: UUID primary key
        created_at: Issuance timestamp
        user_id: Owner (cascade delete)
        token_hash: Fingerprint of the signed token (unique)
        expires_at: Same instant as the token's exp claim
        is_revoked: Set on logout or logout-all
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 fingerprint of the refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        nullable=False,
        index=True,
    )

    is_revoked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    def __repr__(self) -> str:
        return (
            f"<RefreshToken(id={self.id}, user_id={self.user_id}, "
            f"is_revoked={self.is_revoked})>"
        )
