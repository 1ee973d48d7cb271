"""Employee model — staff member owned by a business."""

import uuid
from datetime import datetime

from sqlmodel import Field, SQLModel

from bookdesk.models.base import TimestampMixin, new_uuid


class Employee(TimestampMixin, SQLModel, table=True):
    __tablename__ = "employees"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    business_id: uuid.UUID = Field(foreign_key="businesses.id", nullable=False, index=True)
    name: str = Field(max_length=255, nullable=False)


# ── Pydantic schemas ─────────────────────────────────────────

class EmployeeCreate(SQLModel):
    name: str = Field(min_length=1, max_length=255)


class EmployeeRead(SQLModel):
    id: uuid.UUID
    business_id: uuid.UUID
    name: str
    created_at: datetime
