"""Async engine and session lifecycle for the persistence layer.

One Database instance lives for the whole process (see
src.core.container.get_database). Each HTTP request borrows a session from
it, and every repository built for that request shares the session, so a
request either commits as a whole or rolls back as a whole.

PostgreSQL (asyncpg) is the production target. SQLite (aiosqlite) backs
local development and the test suite.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.infrastructure.persistence.base import BaseModel


class Database:
    """Owns the engine and hands out unit-of-work sessions.

    Usage:
        db = Database("sqlite+aiosqlite:///./almanac.db")
        async with db.get_session() as session:
            calendars = CalendarRepository(session)
            await calendars.save(calendar)
        # committed here, or rolled back if the block raised
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.is_sqlite = database_url.startswith("sqlite")

        engine_kwargs: dict[str, Any] = {"echo": echo}
        if not self.is_sqlite:
            engine_kwargs.update(pool_pre_ping=True, pool_size=10, max_overflow=5)

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
        # per connection; membership cleanup depends on it.
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _sqlite_foreign_keys_on)

        # Entities are mapped out of models after commit, so attributes must
        # stay loaded.
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on clean exit and rolls back on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every registered table. Alembic owns the schema in production."""
        import src.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        import src.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Return True when a trivial query round-trips to the database."""
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True


def _sqlite_foreign_keys_on(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
