"""Business accounts — registration, login, profile, deletion, password reset."""

import logging
import uuid
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, EmailStr, Field
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookdesk.core.config import get_settings
from bookdesk.core.errors import ConflictError, CredentialsError, NotFoundError, ValidationError
from bookdesk.core.security import (
    generate_reset_token,
    hash_password,
    hash_reset_token,
    issue_token,
    verify_password,
)
from bookdesk.models.appointment import Appointment
from bookdesk.models.assignment import EmployeeService
from bookdesk.models.availability import AvailabilitySlot, DayOfWeek, SlotIn
from bookdesk.models.base import utcnow
from bookdesk.models.business import Business, BusinessProfile, BusinessProfileUpdate
from bookdesk.models.employee import Employee
from bookdesk.models.service import Service
from bookdesk.services.availability import build_slots
from bookdesk.services.notifications import EmailNotifier

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


# ── Schemas ──────────────────────────────────────────────────

class InitialEmployee(BaseModel):
    name: str | None = None
    schedule: dict[DayOfWeek, list[SlotIn]] = {}


class InitialService(BaseModel):
    """Seed entries are lenient: incomplete ones are skipped."""
    title: str | None = None
    price: str | float | None = None
    duration: str | int | None = None


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=128)
    phone: str = Field(min_length=1, max_length=50)
    address: str = Field(min_length=1, max_length=500)
    category: str = Field(min_length=1, max_length=100)
    employees: list[InitialEmployee] = []
    services: list[InitialService] = []


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    token: str
    business_id: uuid.UUID


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    reset_token: str = Field(min_length=1)
    new_password: str
    confirm_new_password: str


# ── Helpers ──────────────────────────────────────────────────

async def _by_email(session: AsyncSession, email: str) -> Business | None:
    result = await session.execute(select(Business).where(Business.email == email))
    return result.scalar_one_or_none()


async def _get_business(session: AsyncSession, tenant_id: uuid.UUID) -> Business:
    business = await session.get(Business, tenant_id)
    if business is None:
        raise NotFoundError("Business not found")
    return business


def _seed_service(business_id: uuid.UUID, entry: InitialService) -> Service | None:
    if not entry.title or entry.price is None or entry.duration is None:
        return None
    try:
        price = Decimal(str(entry.price))
        duration = int(entry.duration)
    except (InvalidOperation, ValueError):
        return None
    if price <= 0 or duration <= 0:
        return None
    return Service(business_id=business_id, title=entry.title, price=price, duration=duration)


# ── Operations ───────────────────────────────────────────────

async def register(session: AsyncSession, body: RegisterRequest) -> TokenResponse:
    """Create a business plus optional seed employees/schedules/services."""
    if await _by_email(session, body.email) is not None:
        raise ConflictError("This email is already in use")

    business = Business(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        phone=body.phone,
        address=body.address,
        category=body.category,
    )
    try:
        session.add(business)
        await session.flush()  # populate business.id

        for entry in body.employees:
            if not entry.name:
                continue
            employee = Employee(business_id=business.id, name=entry.name)
            session.add(employee)
            await session.flush()
            session.add_all(build_slots(employee.id, entry.schedule))

        for entry in body.services:
            service = _seed_service(business.id, entry)
            if service is not None:
                session.add(service)

        await session.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent registration for the same email
        await session.rollback()
        raise ConflictError("This email is already in use") from exc
    except Exception:
        await session.rollback()
        raise

    logger.info("Registered business %s", business.id)
    return TokenResponse(token=issue_token(business.id, business.email), business_id=business.id)


async def login(session: AsyncSession, body: LoginRequest) -> TokenResponse:
    business = await _by_email(session, body.email)
    if business is None or not verify_password(body.password, business.password_hash):
        raise CredentialsError()
    return TokenResponse(token=issue_token(business.id, business.email), business_id=business.id)


async def get_profile(session: AsyncSession, tenant_id: uuid.UUID) -> BusinessProfile:
    business = await _get_business(session, tenant_id)
    return BusinessProfile.model_validate(business)


async def update_profile(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    body: BusinessProfileUpdate,
) -> BusinessProfile:
    business = await _get_business(session, tenant_id)

    if body.email != business.email:
        other = await _by_email(session, body.email)
        if other is not None and other.id != business.id:
            raise ConflictError("The new email is already used by another account")

    if body.new_password:
        if not body.current_password:
            raise ValidationError("The current password is required to set a new one")
        if not verify_password(body.current_password, business.password_hash):
            raise ValidationError("The current password is incorrect")
        business.password_hash = hash_password(body.new_password)

    business.name = body.name
    business.email = body.email
    business.phone = body.phone
    business.address = body.address
    business.category = body.category
    business.updated_at = utcnow()

    session.add(business)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConflictError("The new email is already used by another account") from exc
    await session.refresh(business)
    return BusinessProfile.model_validate(business)


async def delete_account(session: AsyncSession, tenant_id: uuid.UUID) -> None:
    """Remove the business and everything it owns, children first, atomically."""
    business = await _get_business(session, tenant_id)

    employee_ids = select(Employee.id).where(Employee.business_id == tenant_id)
    service_ids = select(Service.id).where(Service.business_id == tenant_id)
    try:
        await session.execute(delete(Appointment).where(Appointment.business_id == tenant_id))
        await session.execute(
            delete(EmployeeService).where(
                EmployeeService.employee_id.in_(employee_ids)  # type: ignore[attr-defined]
                | EmployeeService.service_id.in_(service_ids)  # type: ignore[attr-defined]
            )
        )
        await session.execute(
            delete(AvailabilitySlot).where(
                AvailabilitySlot.employee_id.in_(employee_ids)  # type: ignore[attr-defined]
            )
        )
        await session.execute(delete(Employee).where(Employee.business_id == tenant_id))
        await session.execute(delete(Service).where(Service.business_id == tenant_id))
        await session.delete(business)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Deleted business %s and all dependent rows", tenant_id)


async def request_password_reset(
    session: AsyncSession,
    email: str,
    notifier: EmailNotifier,
) -> None:
    """Store a reset token and mail the link. Silent for unknown emails."""
    business = await _by_email(session, email)
    if business is None:
        return

    settings = get_settings()
    raw_token = generate_reset_token()
    business.reset_token_hash = hash_reset_token(raw_token)
    business.reset_token_expires_at = utcnow() + timedelta(
        minutes=settings.password_reset_expire_minutes
    )
    session.add(business)
    await session.commit()

    link = f"{settings.password_reset_url}?token={raw_token}"
    await notifier.send(
        business.email,
        "Reset your password",
        f"Use the link below to choose a new password. It expires in "
        f"{settings.password_reset_expire_minutes} minutes.\n\n{link}",
    )


async def reset_password(session: AsyncSession, body: ResetPasswordRequest) -> None:
    if body.new_password != body.confirm_new_password:
        raise ValidationError("The new password and its confirmation do not match")
    if len(body.new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"The new password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    result = await session.execute(
        select(Business).where(Business.reset_token_hash == hash_reset_token(body.reset_token))
    )
    business = result.scalar_one_or_none()
    if (
        business is None
        or business.reset_token_expires_at is None
        or business.reset_token_expires_at < utcnow()
    ):
        raise CredentialsError("Invalid or expired password reset token")

    business.password_hash = hash_password(body.new_password)
    business.reset_token_hash = None
    business.reset_token_expires_at = None
    business.updated_at = utcnow()
    session.add(business)
    await session.commit()
