"""
Main FastAPI application entry point.

Builds the application: lifespan (optional table creation, engine
disposal), CORS, trace middleware, uniform error handlers and routers.

Run:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: create missing tables when DB_CREATE_TABLES is set (Alembic
    owns the schema otherwise).
    Shutdown: dispose of the engine and its connection pool.
    """
    logger = get_logger()
    database = get_database()

    if settings.db_create_tables:
        await database.create_all()
        logger.info("database_tables_created")

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build a configured FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        description="Calendar backend: accounts, authentication, calendars and sharing",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id"],
    )
    # Added last so it wraps CORS and runs first
    application.add_middleware(TraceMiddleware)

    register_exception_handlers(application)

    application.include_router(system_router)
    application.include_router(api_router)
    return application


app = create_app()
