"""Pre-workflow guard contract.

A guard inspects the account addressed by an email before a workflow runs
and either lets the request through or short-circuits it with an error.
Guards never raise; unknown emails always pass so the workflow itself
decides how to report them.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol, TypeVar

from src.application.errors import ApplicationError
from src.core.result import Failure, Result

T = TypeVar("T")


class Guard(Protocol):
    """Protocol for request guards keyed by account email."""

    async def check(self, email: str) -> Result[None, ApplicationError]:
        """Return Success(None) to allow, Failure to reject."""
        ...


async def run_guarded(
    guards: Sequence[Guard],
    email: str,
    action: Callable[[], Awaitable[Result[T, ApplicationError]]],
) -> Result[T, ApplicationError]:
    """Run guards in order, then the action if every guard allowed it.

    Args:
        guards: Guards to evaluate (first rejection wins).
        email: Account email the request targets.
        action: Zero-argument coroutine factory for the workflow.

    Returns:
        The first guard Failure, or the action's Result.

    Example:
        >>> result = await run_guarded(
        ...     [login_guard], cmd.email, lambda: handler.handle(cmd)
        ... )
    """
    for guard in guards:
        match await guard.check(email):
            case Failure() as failure:
                return failure
    return await action()
