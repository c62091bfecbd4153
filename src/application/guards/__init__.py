"""Request guards composed before auth workflows."""

from src.application.guards.account_guards import (
    LoginLockGuard,
    PasswordResetCooldownGuard,
)
from src.application.guards.base import Guard, run_guarded

__all__ = [
    "Guard",
    "LoginLockGuard",
    "PasswordResetCooldownGuard",
    "run_guarded",
]
