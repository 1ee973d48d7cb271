"""Appointment model — one booked (or cancelled) client visit."""

import uuid
from datetime import datetime

from pydantic import field_validator
from sqlalchemy import Text
from sqlmodel import Column, Field, SQLModel

from bookdesk.models.base import TimestampMixin, new_uuid

DEFAULT_STATUS = "booked"


class Appointment(TimestampMixin, SQLModel, table=True):
    __tablename__ = "appointments"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    business_id: uuid.UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    employee_id: uuid.UUID = Field(foreign_key="employees.id", nullable=False, index=True)
    service_id: uuid.UUID = Field(foreign_key="services.id", nullable=False, index=True)

    client_name: str = Field(max_length=255, nullable=False)
    client_contact: str | None = Field(default=None, max_length=255)

    starts_at: datetime = Field(nullable=False, index=True)
    ends_at: datetime | None = Field(default=None)

    # Free text; no transition rules are enforced
    status: str = Field(default=DEFAULT_STATUS, max_length=50)
    notes: str | None = Field(default=None, sa_column=Column(Text, nullable=True))


# ── Pydantic schemas ─────────────────────────────────────────

class AppointmentWrite(SQLModel):
    """Body for both create and update.

    Datetimes arrive as strings and are parsed by ``services.timeparse`` so
    that every handler reports bad input the same way.
    """
    employee_id: uuid.UUID
    service_id: uuid.UUID
    client_name: str = Field(min_length=1, max_length=255)
    starts_at: str
    ends_at: str | None = None
    client_contact: str | None = Field(default=None, max_length=255)
    status: str | None = Field(default=None, max_length=50)
    notes: str | None = None

    @field_validator("client_name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class AppointmentRead(SQLModel):
    id: uuid.UUID
    business_id: uuid.UUID
    employee_id: uuid.UUID
    service_id: uuid.UUID
    client_name: str
    client_contact: str | None
    starts_at: datetime
    ends_at: datetime | None
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime


class AppointmentListItem(AppointmentRead):
    """List row joined with employee and service details."""
    employee_name: str | None = None
    service_title: str | None = None
    service_duration: int | None = None


class DeleteOldRequest(SQLModel):
    cutoff_date: str


class DeleteOldResponse(SQLModel):
    deleted: int
