"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Token generation (JWT)
- One-time codes
- Email (SMTP, or a log-only stub when no SMTP host is configured)
- Logging (structlog console/JSON)
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        EmailServiceProtocol,
        LoggerProtocol,
        OneTimeCodeProtocol,
        PasswordHashingProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    FastAPI caches this dependency per request, so every repository built
    for one request shares the same session.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (cost from settings)."""
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT service singleton.

    Signing keys, issuer and lifetimes come from an explicit TokenSettings
    object built from Settings.
    """
    from src.infrastructure.security import JWTService

    return JWTService(config=settings.token_settings())


@lru_cache()
def get_code_service() -> "OneTimeCodeProtocol":
    """Get one-time code service singleton."""
    from src.infrastructure.security import OneTimeCodeService

    return OneTimeCodeService(expire_minutes=settings.code_expire_minutes)


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    """Get email service singleton.

    - SMTP_HOST set: SmtpEmailService (any environment)
    - otherwise: StubEmailService, which writes codes to the log only in
      development so they can be entered by hand
    """
    from src.infrastructure.email import SmtpEmailService, StubEmailService

    smtp = settings.smtp_settings()
    if smtp is not None:
        return SmtpEmailService(
            smtp,
            get_logger(),
            code_expire_minutes=settings.code_expire_minutes,
        )
    return StubEmailService(
        logger=get_logger(),
        reveal_codes=settings.environment == Environment.DEVELOPMENT,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
