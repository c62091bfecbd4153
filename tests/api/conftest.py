"""API test fixtures.

The app runs in-process through httpx's ASGITransport (no lifespan), with
the database dependencies pointed at the per-test SQLite file and the email
service replaced by an outbox that records every code sent.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.container import get_database, get_db_session, get_password_service
from src.core.result import Result, Success
from src.core.errors import DeliveryError
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import UserRepository
from src.main import app
from tests.api.helpers import PASSWORD


@dataclass
class SentEmail:
    kind: str
    to: str
    name: str
    code: str


@dataclass
class Outbox:
    """Email service that keeps sent codes in memory."""

    sent: list[SentEmail] = field(default_factory=list)

    async def send_verification_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self.sent.append(SentEmail("verification", to_email, name, code))
        return Success(value=None)

    async def send_password_reset_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self.sent.append(SentEmail("password_reset", to_email, name, code))
        return Success(value=None)

    async def send_password_change_code(
        self, to_email: str, name: str, code: str
    ) -> Result[None, DeliveryError]:
        self.sent.append(SentEmail("password_change", to_email, name, code))
        return Success(value=None)

    def last_code(self, kind: str, to: str) -> str:
        for email in reversed(self.sent):
            if email.kind == kind and email.to == to:
                return email.code
        raise AssertionError(f"no {kind} email sent to {to}")


@pytest.fixture
def outbox(monkeypatch) -> Outbox:
    box = Outbox()
    monkeypatch.setattr(
        "src.core.container.auth_handlers.get_email_service", lambda: box
    )
    return box


@pytest_asyncio.fixture
async def client(database: Database, outbox: Outbox) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with test database and outbox."""

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_database] = lambda: database
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        ) as http_client:
            yield http_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def create_account(database: Database):
    """Insert a verified account directly and return it."""

    async def _create(
        email: str = "ada@example.com",
        name: str = "Ada Lovelace",
        role: UserRole = UserRole.USER,
        password: str = PASSWORD,
    ) -> User:
        user = User(
            id=uuid7(),
            email=email,
            name=name,
            password_hash=get_password_service().hash_password(password),
            role=role,
            is_email_verified=True,
        )
        async with database.get_session() as session:
            await UserRepository(session).save(user)
        return user

    return _create


@pytest.fixture
def login(client: AsyncClient):
    """Log in and return the data block (tokens and user)."""

    async def _login(email: str = "ada@example.com", password: str = PASSWORD) -> dict:
        response = await client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _login
