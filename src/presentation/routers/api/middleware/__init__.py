"""Request middleware and auth dependencies."""

from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
    get_current_user_optional,
    require_role,
)
from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "CurrentUser",
    "TraceMiddleware",
    "get_current_user",
    "get_current_user_optional",
    "get_trace_id",
    "require_role",
]
