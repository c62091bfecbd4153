"""Data Transfer Objects returned by handlers."""

from src.application.dtos.auth_dtos import (
    AccessTokenResult,
    LoginResult,
    ResetTokenResult,
)

__all__ = [
    "AccessTokenResult",
    "LoginResult",
    "ResetTokenResult",
]
