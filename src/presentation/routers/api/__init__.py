"""API routers.

Resources (all under the configured prefix, default /api):
    /auth                               - Registration, login, tokens, password reset
    /users                              - User management
    /calendars                          - Calendars owned by the caller
    /calendars/{calendar_id}/members    - Calendar membership
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.auth import auth_router
from src.presentation.routers.api.calendars import calendars_router
from src.presentation.routers.api.members import members_router
from src.presentation.routers.api.users import users_router

api_router = APIRouter(prefix=settings.api_prefix)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(calendars_router)
api_router.include_router(members_router)

__all__ = [
    "api_router",
]
