"""Alternate schedule routes keyed by employee id."""

import uuid

from fastapi import APIRouter

from bookdesk.api.deps import Auth, Session
from bookdesk.models.availability import SlotRead, WeeklySchedule
from bookdesk.services import availability

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.get("/{employee_id}", response_model=dict[int, list[SlotRead]])
async def get_schedule(
    employee_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> dict[int, list[SlotRead]]:
    return await availability.get_schedule(session, auth.tenant_id, employee_id)


@router.post("/{employee_id}", response_model=dict[int, list[SlotRead]])
async def set_schedule(
    employee_id: uuid.UUID,
    body: WeeklySchedule,
    auth: Auth,
    session: Session,
) -> dict[int, list[SlotRead]]:
    await availability.replace_all(session, auth.tenant_id, employee_id, body.schedule)
    return await availability.get_schedule(session, auth.tenant_id, employee_id)
