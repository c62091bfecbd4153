"""ListMembers query handler (caller must be a member)."""

from src.application.errors import ApplicationError
from src.application.queries.calendar_queries import ListMembers
from src.application.services import MembershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.entities import CalendarMember
from src.domain.protocols import MemberRepository


class ListMembersHandler:
    def __init__(
        self,
        member_repo: MemberRepository,
        verifier: MembershipVerifier,
    ) -> None:
        self._member_repo = member_repo
        self._verifier = verifier

    async def handle(
        self, query: ListMembers
    ) -> Result[list[CalendarMember], ApplicationError]:
        match await self._verifier.require_member(query.calendar_id, query.actor_id):
            case Failure() as failure:
                return failure

        members = await self._member_repo.list_by_calendar(query.calendar_id)
        return Success(value=members)
