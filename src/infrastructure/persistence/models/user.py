"""User database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email_verification_code / two_factor_code: SHA-256 hashes of one-time
      codes, never the codes themselves
    - failed_login_attempts / lock_until: account lockout state
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and account management.

    Indexes:
        - email: unique, for login and duplicate checks

    Relationships (database level, ON DELETE CASCADE):
        - refresh_tokens
        - calendars (owned)
        - calendar_members
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="user",
        comment="admin or user",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Email verification status (must be True to login)",
    )

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    lock_until: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Account unusable until this moment",
    )

    # Email verification slot
    email_verification_code: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=None,
    )
    email_verification_code_expiry: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
    )

    # Password reset / change slot
    two_factor_code: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=None,
    )
    two_factor_code_expiry: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
    )
    pending_password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Bcrypt hash applied once the change code is confirmed",
    )

    last_password_reset_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Anchor of the password reset cooldown",
    )

    last_login: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
    )

    preferences: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Timezone and notification channel flags",
    )

    def __repr__(self) -> str:
        return (
            f"<User("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"is_email_verified={self.is_email_verified}, "
            f"is_active={self.is_active}"
            f")>"
        )
