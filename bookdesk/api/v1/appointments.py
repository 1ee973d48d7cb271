"""Appointment endpoints — all queries scoped to the caller's business."""

import uuid

from fastapi import APIRouter, status

from bookdesk.api.deps import Auth, Notifier, Session
from bookdesk.models.appointment import (
    AppointmentListItem,
    AppointmentRead,
    AppointmentWrite,
    DeleteOldRequest,
    DeleteOldResponse,
)
from bookdesk.services import appointments
from bookdesk.services.timeparse import require_timestamp

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=list[AppointmentListItem])
async def list_appointments(auth: Auth, session: Session) -> list[AppointmentListItem]:
    return await appointments.list_appointments(session, auth.tenant_id)


@router.post("", response_model=AppointmentRead, status_code=status.HTTP_201_CREATED)
@router.post(
    "/add",
    response_model=AppointmentRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_appointment(
    body: AppointmentWrite,
    auth: Auth,
    session: Session,
    notifier: Notifier,
) -> AppointmentRead:
    return await appointments.create_appointment(session, auth.tenant_id, body, notifier)


@router.post("/deleteOld", response_model=DeleteOldResponse)
async def delete_old_appointments(
    body: DeleteOldRequest,
    auth: Auth,
    session: Session,
) -> DeleteOldResponse:
    """Bulk-delete appointments that start before ``cutoff_date``."""
    cutoff = require_timestamp(body.cutoff_date, "cutoff date")
    deleted = await appointments.delete_older_than(session, auth.tenant_id, cutoff)
    return DeleteOldResponse(deleted=deleted)


@router.put("/{appointment_id}", response_model=AppointmentRead)
async def update_appointment(
    appointment_id: uuid.UUID,
    body: AppointmentWrite,
    auth: Auth,
    session: Session,
) -> AppointmentRead:
    return await appointments.update_appointment(session, auth.tenant_id, appointment_id, body)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    appointment_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> None:
    await appointments.delete_appointment(session, auth.tenant_id, appointment_id)
