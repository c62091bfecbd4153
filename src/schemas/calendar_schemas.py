"""Calendar and membership request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Calendar, CalendarMember


class CalendarResponse(BaseModel):
    id: UUID
    owner_id: UUID
    name: str
    description: str | None = None
    type: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, calendar: Calendar) -> "CalendarResponse":
        return cls(
            id=calendar.id,
            owner_id=calendar.owner_id,
            name=calendar.name,
            description=calendar.description,
            type=calendar.type.value,
            created_at=calendar.created_at,
            updated_at=calendar.updated_at,
        )


class CreateCalendarRequest(BaseModel):
    """Request schema for calendar creation."""

    name: str = Field(..., description="Calendar name", examples=["Family"])
    type: str = Field(..., description="personal or group", examples=["group"])
    description: str | None = Field(default=None, description="Optional description")


class UpdateCalendarRequest(BaseModel):
    """Partial calendar update (owner only)."""

    name: str | None = None
    type: str | None = None
    description: str | None = None


class MemberResponse(BaseModel):
    id: UUID
    user_id: UUID
    calendar_id: UUID
    role: str
    joined_at: datetime

    @classmethod
    def from_entity(cls, member: CalendarMember) -> "MemberResponse":
        return cls(
            id=member.id,
            user_id=member.user_id,
            calendar_id=member.calendar_id,
            role=member.role.value,
            joined_at=member.joined_at,
        )


class AddMemberRequest(BaseModel):
    user_id: UUID = Field(..., description="User to add")
    role: str = Field(default="viewer", description="owner, editor or viewer")


class UpdateMemberRoleRequest(BaseModel):
    role: str = Field(..., description="owner, editor or viewer")
