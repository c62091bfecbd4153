"""System router for status endpoints.

Lightweight, side-effect free endpoints for health checks and basic
diagnostics.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database

system_router = APIRouter(prefix=settings.api_prefix, tags=["System"])


@system_router.get("/status")
async def api_status() -> dict[str, object]:
    """API name, version and environment."""
    return {
        "success": True,
        "data": {
            "name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment.value,
            "status": "operational",
        },
    }


@system_router.get("/status/db")
async def database_status(database: Database = Depends(get_database)) -> JSONResponse:
    """Report database reachability (503 when unreachable)."""
    if await database.check_connection():
        return JSONResponse(
            content={"success": True, "data": {"database": "connected"}},
        )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "success": False,
            "error": {
                "code": "server_error",
                "message": "Database is unreachable",
            },
        },
    )
