"""Result types for railway-oriented programming.

Handlers, token verification and validators return a Result instead of
raising, so every failure path is visible in the signature and can be
matched explicitly at the HTTP boundary.

Usage:
    def parse_role(raw: str) -> Result[UserRole, str]:
        try:
            return Success(value=UserRole(raw))
        except ValueError:
            return Failure(error=f"Unknown role: {raw}")

    match parse_role("admin"):
        case Success(value=role):
            ...
        case Failure(error=message):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing what went wrong.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
