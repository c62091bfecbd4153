"""MemberRepository - SQLAlchemy implementation of MemberRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.calendar_member import CalendarMember
from src.domain.enums import MemberRole
from src.infrastructure.persistence.models.calendar_member import (
    CalendarMember as CalendarMemberModel,
)


class MemberRepository:
    """Maps domain CalendarMember entities to the calendar_members table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, member_id: UUID) -> CalendarMember | None:
        model = await self.session.get(CalendarMemberModel, member_id)
        return self._to_domain(model) if model else None

    async def find_by_user_and_calendar(
        self, user_id: UUID, calendar_id: UUID
    ) -> CalendarMember | None:
        stmt = select(CalendarMemberModel).where(
            CalendarMemberModel.user_id == user_id,
            CalendarMemberModel.calendar_id == calendar_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_calendar(self, calendar_id: UUID) -> list[CalendarMember]:
        stmt = (
            select(CalendarMemberModel)
            .where(CalendarMemberModel.calendar_id == calendar_id)
            .order_by(CalendarMemberModel.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, member: CalendarMember) -> None:
        """Create a membership.

        Raises:
            IntegrityError: If the user is already a member of the calendar.
        """
        self.session.add(
            CalendarMemberModel(
                id=member.id,
                user_id=member.user_id,
                calendar_id=member.calendar_id,
                role=member.role.value,
                created_at=member.joined_at,
            )
        )
        await self.session.commit()

    async def update(self, member: CalendarMember) -> None:
        model = await self.session.get(CalendarMemberModel, member.id)
        if model is None:
            return
        model.role = member.role.value
        await self.session.commit()

    async def delete(self, member_id: UUID) -> bool:
        result = await self.session.execute(
            delete(CalendarMemberModel).where(CalendarMemberModel.id == member_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, model: CalendarMemberModel) -> CalendarMember:
        return CalendarMember(
            id=model.id,
            user_id=model.user_id,
            calendar_id=model.calendar_id,
            role=MemberRole(model.role),
            joined_at=model.created_at,
        )
