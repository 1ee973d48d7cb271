"""Business model — the tenant, top-level isolation boundary."""

import uuid
from datetime import datetime

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

from bookdesk.models.base import TimestampMixin, new_uuid


class Business(TimestampMixin, SQLModel, table=True):
    __tablename__ = "businesses"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=320, unique=True, nullable=False, index=True)
    password_hash: str = Field(nullable=False)

    phone: str = Field(default="", max_length=50)
    address: str = Field(default="", max_length=500)
    category: str = Field(default="", max_length=100)

    # SHA-256 of the outstanding password reset token, if any
    reset_token_hash: str | None = Field(default=None, index=True)
    reset_token_expires_at: datetime | None = Field(default=None)


# ── Pydantic schemas ─────────────────────────────────────────

class BusinessProfile(SQLModel):
    id: uuid.UUID
    name: str
    email: str
    phone: str
    address: str
    category: str


class BusinessProfileUpdate(SQLModel):
    """Full replace of the profile; password change is optional."""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    address: str = Field(min_length=1, max_length=500)
    category: str = Field(min_length=1, max_length=100)
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=6, max_length=128)
