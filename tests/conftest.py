"""Pytest configuration shared by unit, integration and API tests.

Environment variables are set before anything under ``src`` is imported,
because Settings are loaded once at import time.

Fixtures:
- make_user: factory for domain User entities
- mock_logger: LoggerProtocol stand-in
- database: fresh SQLite database per test (tables created)
- session: AsyncSession bound to that database
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_ACCESS_SECRET", "test-access-secret-0123456789abcdefghij")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret-0123456789abcdefghi")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./almanac-test.db")

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.core.config import AccountSecuritySettings, TokenSettings  # noqa: E402
from src.domain.entities.user import User  # noqa: E402
from src.domain.enums import UserRole  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402

ACCESS_SECRET = "unit-access-secret-0123456789abcdefghijk"
REFRESH_SECRET = "unit-refresh-secret-0123456789abcdefghij"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real (SQLite) database"
    )
    config.addinivalue_line("markers", "api: End-to-end tests through the ASGI app")


# =============================================================================
# Domain helpers
# =============================================================================


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for User entities with sensible defaults.

    Usage:
        user = make_user(email="ada@example.com", is_email_verified=True)
    """

    def _make(**overrides: Any) -> User:
        values: dict[str, Any] = {
            "id": uuid7(),
            "email": "ada@example.com",
            "name": "Ada Lovelace",
            "password_hash": "hashed_password",
            "role": UserRole.USER,
            "is_email_verified": True,
        }
        values.update(overrides)
        return User(**values)

    return _make


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double accepting any structured call."""
    return Mock()


@pytest.fixture
def token_settings() -> TokenSettings:
    """Token configuration with valid, distinct secrets."""
    return TokenSettings(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture
def security_settings() -> AccountSecuritySettings:
    """Default lockout and cooldown rules (5 attempts, 15 min, 24 h)."""
    return AccountSecuritySettings()


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """Fresh SQLite database file per test, with all tables created.

    Each test gets its own engine so no state leaks between tests.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()

    yield db

    await db.close()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Session on the per-test database."""
    async with database.get_session() as db_session:
        yield db_session
