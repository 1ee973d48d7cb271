"""Employee CRUD plus per-employee services and weekly schedule."""

import uuid

from fastapi import APIRouter, status
from sqlalchemy import delete, func
from sqlmodel import select

from bookdesk.api.deps import Auth, Session
from bookdesk.core.errors import ConflictError
from bookdesk.models.appointment import Appointment
from bookdesk.models.assignment import (
    EmployeeService,
    EmployeeServicesRead,
    EmployeeServicesUpdate,
)
from bookdesk.models.availability import AvailabilitySlot, SlotRead, WeeklySchedule
from bookdesk.models.base import utcnow
from bookdesk.models.employee import Employee, EmployeeCreate, EmployeeRead
from bookdesk.services import assignments, availability
from bookdesk.services.guard import assert_owned

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeRead])
async def list_employees(auth: Auth, session: Session) -> list[EmployeeRead]:
    stmt = (
        select(Employee)
        .where(Employee.business_id == auth.tenant_id)
        .order_by(Employee.name.asc())  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    return [EmployeeRead.model_validate(e) for e in result.scalars().all()]


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
@router.post(
    "/add",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_employee(
    body: EmployeeCreate,
    auth: Auth,
    session: Session,
) -> EmployeeRead:
    employee = Employee(business_id=auth.tenant_id, name=body.name)
    session.add(employee)
    await session.commit()
    await session.refresh(employee)
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: uuid.UUID,
    body: EmployeeCreate,
    auth: Auth,
    session: Session,
) -> EmployeeRead:
    employee = await assert_owned(session, Employee, employee_id, auth.tenant_id)
    employee.name = body.name
    employee.updated_at = utcnow()
    session.add(employee)
    await session.commit()
    await session.refresh(employee)
    return EmployeeRead.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> None:
    """Delete the employee together with its slots and service links."""
    employee = await assert_owned(session, Employee, employee_id, auth.tenant_id)

    booked = (await session.execute(
        select(func.count()).select_from(Appointment).where(Appointment.employee_id == employee_id)
    )).scalar_one()
    if booked:
        raise ConflictError("Employee still has appointments; delete or reassign them first")

    try:
        await session.execute(
            delete(AvailabilitySlot).where(AvailabilitySlot.employee_id == employee_id)
        )
        await session.execute(
            delete(EmployeeService).where(EmployeeService.employee_id == employee_id)
        )
        await session.delete(employee)
        await session.commit()
    except Exception:
        await session.rollback()
        raise


# ── Assigned services ("packages") ────────────────────────────

@router.get("/{employee_id}/packages", response_model=EmployeeServicesRead)
async def get_employee_services(
    employee_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> EmployeeServicesRead:
    ids = await assignments.services_for_employee(session, auth.tenant_id, employee_id)
    return EmployeeServicesRead(employee_id=employee_id, service_ids=ids)


@router.post("/{employee_id}/packages", response_model=EmployeeServicesRead)
async def set_employee_services(
    employee_id: uuid.UUID,
    body: EmployeeServicesUpdate,
    auth: Auth,
    session: Session,
) -> EmployeeServicesRead:
    ids = await assignments.replace_for_employee(
        session, auth.tenant_id, employee_id, body.service_ids
    )
    return EmployeeServicesRead(employee_id=employee_id, service_ids=sorted(ids, key=str))


# ── Weekly schedule ───────────────────────────────────────────

@router.get("/{employee_id}/schedule", response_model=dict[int, list[SlotRead]])
async def get_employee_schedule(
    employee_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> dict[int, list[SlotRead]]:
    return await availability.get_schedule(session, auth.tenant_id, employee_id)


@router.post("/{employee_id}/schedule", response_model=dict[int, list[SlotRead]])
async def set_employee_schedule(
    employee_id: uuid.UUID,
    body: WeeklySchedule,
    auth: Auth,
    session: Session,
) -> dict[int, list[SlotRead]]:
    """Replace the whole weekly schedule and return what was stored."""
    await availability.replace_all(session, auth.tenant_id, employee_id, body.schedule)
    return await availability.get_schedule(session, auth.tenant_id, employee_id)
