"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating access tokens.
Use these dependencies to protect routes that require authentication.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.user_id)}

    # Admin-only route
    @router.post("/users")
    async def create_user(
        current_user: CurrentUser = Depends(require_role(UserRole.ADMIN)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service, get_user_repository
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import TokenGenerationProtocol, UserRepository

# HTTP Bearer token extractor (missing credentials raise our own 401)
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller resolved from an access token.

    Attributes:
        user_id: User's unique identifier.
        email: User's current email address.
        name: Display name.
        role: Authorization role (from the stored user, not the token).
    """

    user_id: UUID
    email: str
    name: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _resolve_user(
    credentials: HTTPAuthorizationCredentials | None,
    token_service: TokenGenerationProtocol,
    user_repo: UserRepository,
) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise _unauthorized(AuthErrorMessage.NOT_AUTHENTICATED)

    match token_service.verify_access(credentials.credentials):
        case Failure(error=error):
            raise _unauthorized(error.message)
        case Success(value=claims):
            pass

    user = await user_repo.find_by_id(claims.user_id)
    if user is None or not user.is_active:
        raise _unauthorized(AuthErrorMessage.INVALID_ACCESS_TOKEN)

    return CurrentUser(
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Get the authenticated caller.

    Verifies the bearer token as an access token, then loads the user and
    requires the account to be active.

    Raises:
        HTTPException 401: Missing, invalid or expired token, or a missing
            or deactivated user.
    """
    return await _resolve_user(credentials, token_service, user_repo)


async def get_current_user_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser | None:
    """Get the caller if authenticated, None otherwise.

    Never raises: any authentication failure yields an anonymous caller.
    """
    if credentials is None:
        return None
    try:
        return await _resolve_user(credentials, token_service, user_repo)
    except HTTPException:
        return None


def require_role(
    *allowed_roles: UserRole,
) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires one of the given roles.

    Raises:
        HTTPException 401: Caller not authenticated.
        HTTPException 403: Caller's role not allowed.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=AuthErrorMessage.INSUFFICIENT_PERMISSIONS,
            )
        return current_user

    return role_checker
