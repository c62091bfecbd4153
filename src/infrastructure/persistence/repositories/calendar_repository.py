"""CalendarRepository - SQLAlchemy implementation of CalendarRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.calendar import Calendar
from src.domain.enums import CalendarType
from src.infrastructure.persistence.models.calendar import Calendar as CalendarModel
from src.infrastructure.persistence.models.calendar_member import (
    CalendarMember as CalendarMemberModel,
)


class CalendarRepository:
    """Maps domain Calendar entities to the calendars table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, calendar_id: UUID) -> Calendar | None:
        model = await self.session.get(CalendarModel, calendar_id)
        return self._to_domain(model) if model else None

    async def list_by_owner(self, owner_id: UUID) -> list[Calendar]:
        stmt = (
            select(CalendarModel)
            .where(CalendarModel.owner_id == owner_id)
            .order_by(CalendarModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, calendar: Calendar) -> None:
        self.session.add(
            CalendarModel(
                id=calendar.id,
                owner_id=calendar.owner_id,
                name=calendar.name,
                description=calendar.description,
                type=calendar.type.value,
                created_at=calendar.created_at,
                updated_at=calendar.updated_at,
            )
        )
        await self.session.commit()

    async def update(self, calendar: Calendar) -> None:
        model = await self.session.get(CalendarModel, calendar.id)
        if model is None:
            return
        model.name = calendar.name
        model.description = calendar.description
        model.type = calendar.type.value
        model.updated_at = calendar.updated_at
        await self.session.commit()

    async def delete(self, calendar_id: UUID) -> bool:
        """Delete a calendar together with its memberships."""
        await self.session.execute(
            delete(CalendarMemberModel).where(
                CalendarMemberModel.calendar_id == calendar_id
            )
        )
        result = await self.session.execute(
            delete(CalendarModel).where(CalendarModel.id == calendar_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, model: CalendarModel) -> Calendar:
        return Calendar(
            id=model.id,
            owner_id=model.owner_id,
            name=model.name,
            description=model.description,
            type=CalendarType(model.type),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
