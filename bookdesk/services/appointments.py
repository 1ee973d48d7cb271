"""Appointment ledger — tenant-scoped create / update / delete / list."""

import logging
import uuid
from datetime import date, datetime, time, timedelta

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookdesk.core.errors import NotFoundError
from bookdesk.models.appointment import (
    DEFAULT_STATUS,
    Appointment,
    AppointmentListItem,
    AppointmentRead,
    AppointmentWrite,
)
from bookdesk.models.base import utcnow
from bookdesk.models.employee import Employee
from bookdesk.models.service import Service
from bookdesk.services.guard import assert_owned
from bookdesk.services.notifications import EmailNotifier
from bookdesk.services.timeparse import optional_timestamp, require_timestamp

logger = logging.getLogger(__name__)


async def _validated_fields(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    body: AppointmentWrite,
) -> dict:
    """Run every check a write needs and return the column values.

    Nothing is written here, so a failure leaves the store untouched.
    """
    starts_at = require_timestamp(body.starts_at, "start date/time")
    ends_at = optional_timestamp(body.ends_at, "end date/time")

    await assert_owned(session, Employee, body.employee_id, tenant_id)
    await assert_owned(session, Service, body.service_id, tenant_id)

    return {
        "employee_id": body.employee_id,
        "service_id": body.service_id,
        "client_name": body.client_name,
        "client_contact": body.client_contact or None,
        "starts_at": starts_at,
        "ends_at": ends_at,
        "status": body.status or DEFAULT_STATUS,
        "notes": body.notes or None,
    }


async def _get_or_404(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    appointment_id: uuid.UUID,
) -> Appointment:
    stmt = select(Appointment).where(
        Appointment.id == appointment_id,
        Appointment.business_id == tenant_id,
    )
    result = await session.execute(stmt)
    appt = result.scalar_one_or_none()
    if appt is None:
        raise NotFoundError("Appointment not found")
    return appt


def _joined_select(tenant_id: uuid.UUID):
    return (
        select(Appointment, Employee.name, Service.title, Service.duration)
        .outerjoin(Employee, Appointment.employee_id == Employee.id)  # type: ignore[arg-type]
        .outerjoin(Service, Appointment.service_id == Service.id)  # type: ignore[arg-type]
        .where(Appointment.business_id == tenant_id)
    )


def _to_list_item(
    appt: Appointment,
    employee_name: str | None,
    service_title: str | None,
    service_duration: int | None,
) -> AppointmentListItem:
    return AppointmentListItem(
        **AppointmentRead.model_validate(appt).model_dump(),
        employee_name=employee_name,
        service_title=service_title,
        service_duration=service_duration,
    )


async def list_appointments(
    session: AsyncSession,
    tenant_id: uuid.UUID,
) -> list[AppointmentListItem]:
    """All appointments of the business, earliest first."""
    stmt = _joined_select(tenant_id).order_by(Appointment.starts_at.asc())  # type: ignore[attr-defined]
    result = await session.execute(stmt)
    return [_to_list_item(*row) for row in result.all()]


async def list_for_day(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    day: date,
) -> list[AppointmentListItem]:
    start = datetime.combine(day, time.min)
    stmt = (
        _joined_select(tenant_id)
        .where(
            Appointment.starts_at >= start,
            Appointment.starts_at < start + timedelta(days=1),
        )
        .order_by(Appointment.starts_at.asc())  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    return [_to_list_item(*row) for row in result.all()]


async def create_appointment(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    body: AppointmentWrite,
    notifier: EmailNotifier | None = None,
) -> AppointmentRead:
    fields = await _validated_fields(session, tenant_id, body)

    appt = Appointment(business_id=tenant_id, **fields)
    session.add(appt)
    await session.commit()
    await session.refresh(appt)

    if notifier is not None and appt.client_contact and "@" in appt.client_contact:
        await notifier.send(
            appt.client_contact,
            "Your appointment is booked",
            f"Hello {appt.client_name},\n\n"
            f"your appointment on {appt.starts_at:%Y-%m-%d at %H:%M} is confirmed.",
        )

    return AppointmentRead.model_validate(appt)


async def update_appointment(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    appointment_id: uuid.UUID,
    body: AppointmentWrite,
) -> AppointmentRead:
    """Full replace: every field is taken from ``body``."""
    appt = await _get_or_404(session, tenant_id, appointment_id)
    fields = await _validated_fields(session, tenant_id, body)

    for name, value in fields.items():
        setattr(appt, name, value)
    appt.updated_at = utcnow()

    session.add(appt)
    await session.commit()
    await session.refresh(appt)
    return AppointmentRead.model_validate(appt)


async def delete_appointment(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    appointment_id: uuid.UUID,
) -> None:
    appt = await _get_or_404(session, tenant_id, appointment_id)
    await session.delete(appt)
    await session.commit()


async def delete_older_than(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    cutoff: datetime,
) -> int:
    """Delete the business's appointments starting strictly before ``cutoff``."""
    result = await session.execute(
        delete(Appointment).where(
            Appointment.business_id == tenant_id,
            Appointment.starts_at < cutoff,
        )
    )
    await session.commit()
    deleted = result.rowcount or 0
    logger.info("Deleted %d appointments before %s for business %s", deleted, cutoff, tenant_id)
    return deleted
