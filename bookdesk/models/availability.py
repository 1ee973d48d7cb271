"""AvailabilitySlot — one recurring weekly interval of an employee's time."""

import uuid
from datetime import time
from typing import Annotated

from pydantic import Field as PydanticField
from pydantic import field_serializer, field_validator
from sqlmodel import Field, SQLModel

from bookdesk.models.base import new_uuid

# 0 = Monday … 6 = Sunday (same as datetime.weekday())
DayOfWeek = Annotated[int, PydanticField(ge=0, le=6)]


class AvailabilitySlot(SQLModel, table=True):
    __tablename__ = "availability_slots"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    employee_id: uuid.UUID = Field(foreign_key="employees.id", nullable=False, index=True)
    day_of_week: int = Field(nullable=False, ge=0, le=6)
    start_time: time = Field(nullable=False)
    end_time: time = Field(nullable=False)
    is_available: bool = Field(default=True)


# ── Pydantic schemas ─────────────────────────────────────────

class SlotIn(SQLModel):
    """Incoming slot. Missing or unreadable bounds are tolerated and the slot is dropped."""
    start: time | None = None
    end: time | None = None
    available: bool = True

    @field_validator("start", "end", mode="before")
    @classmethod
    def _blank_or_bad_is_none(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        text = value.strip()
        if not text:
            return None
        try:
            return time.fromisoformat(text).replace(tzinfo=None)
        except ValueError:
            return None


class SlotRead(SQLModel):
    start: time
    end: time
    available: bool

    @field_serializer("start", "end")
    def _hhmm(self, value: time) -> str:
        return value.strftime("%H:%M")


class WeeklySchedule(SQLModel):
    schedule: dict[DayOfWeek, list[SlotIn]] = {}
