"""Service catalog CRUD and service → employees assignment."""

import uuid

from fastapi import APIRouter, status
from sqlalchemy import delete, func
from sqlmodel import select

from bookdesk.api.deps import Auth, Session
from bookdesk.core.errors import ConflictError
from bookdesk.models.appointment import Appointment
from bookdesk.models.assignment import EmployeeService, ServiceAssignment
from bookdesk.models.base import utcnow
from bookdesk.models.service import Service, ServiceCreate, ServiceRead
from bookdesk.services import assignments
from bookdesk.services.guard import assert_owned

router = APIRouter(prefix="/services", tags=["services"])


def _to_read(svc: Service, employee_ids: list[uuid.UUID] | None = None) -> ServiceRead:
    return ServiceRead(
        id=svc.id,
        business_id=svc.business_id,
        title=svc.title,
        price=svc.price,
        duration=svc.duration,
        assigned_employee_ids=employee_ids or [],
        created_at=svc.created_at,
    )


@router.get("", response_model=list[ServiceRead])
async def list_services(auth: Auth, session: Session) -> list[ServiceRead]:
    """Services of the business, each with its assigned employee ids."""
    stmt = (
        select(Service)
        .where(Service.business_id == auth.tenant_id)
        .order_by(Service.title.asc())  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    rows = result.scalars().all()
    by_service = await assignments.employees_by_service(session, [s.id for s in rows])
    return [_to_read(s, by_service[s.id]) for s in rows]


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
@router.post(
    "/add",
    response_model=ServiceRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_service(
    body: ServiceCreate,
    auth: Auth,
    session: Session,
) -> ServiceRead:
    svc = Service(
        business_id=auth.tenant_id,
        title=body.title,
        price=body.price,
        duration=body.duration,
    )
    session.add(svc)
    await session.commit()
    await session.refresh(svc)
    return _to_read(svc)


@router.post("/assign", response_model=ServiceRead)
async def assign_service(
    body: ServiceAssignment,
    auth: Auth,
    session: Session,
) -> ServiceRead:
    """Replace the set of employees offering a service."""
    ids = await assignments.replace_for_service(
        session, auth.tenant_id, body.service_id, body.employee_ids
    )
    svc = await assert_owned(session, Service, body.service_id, auth.tenant_id)
    return _to_read(svc, sorted(ids, key=str))


@router.put("/{service_id}", response_model=ServiceRead)
async def update_service(
    service_id: uuid.UUID,
    body: ServiceCreate,
    auth: Auth,
    session: Session,
) -> ServiceRead:
    svc = await assert_owned(session, Service, service_id, auth.tenant_id)
    svc.title = body.title
    svc.price = body.price
    svc.duration = body.duration
    svc.updated_at = utcnow()
    session.add(svc)
    await session.commit()
    await session.refresh(svc)

    by_service = await assignments.employees_by_service(session, [svc.id])
    return _to_read(svc, by_service[svc.id])


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: uuid.UUID,
    auth: Auth,
    session: Session,
) -> None:
    svc = await assert_owned(session, Service, service_id, auth.tenant_id)

    booked = (await session.execute(
        select(func.count()).select_from(Appointment).where(Appointment.service_id == service_id)
    )).scalar_one()
    if booked:
        raise ConflictError("Service still has appointments; delete or reassign them first")

    try:
        await session.execute(
            delete(EmployeeService).where(EmployeeService.service_id == service_id)
        )
        await session.delete(svc)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
