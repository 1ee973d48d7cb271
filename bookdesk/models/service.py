"""Service model — a bookable catalog entry (title, price, duration)."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlmodel import Field, SQLModel

from bookdesk.models.base import TimestampMixin, new_uuid


class Service(TimestampMixin, SQLModel, table=True):
    __tablename__ = "services"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    business_id: uuid.UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    title: str = Field(max_length=255, nullable=False)
    price: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    # Minutes
    duration: int = Field(nullable=False)


# ── Pydantic schemas ─────────────────────────────────────────

class ServiceCreate(SQLModel):
    title: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    duration: int = Field(gt=0, description="Duration in minutes")


class ServiceRead(SQLModel):
    id: uuid.UUID
    business_id: uuid.UUID
    title: str
    price: Decimal
    duration: int
    assigned_employee_ids: list[uuid.UUID] = []
    created_at: datetime
