"""Employee ↔ service assignments, replaced wholesale from either side."""

import uuid
from collections.abc import Iterable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookdesk.models.assignment import EmployeeService
from bookdesk.models.employee import Employee
from bookdesk.models.service import Service
from bookdesk.services.guard import assert_all_owned, assert_owned


async def replace_for_employee(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    employee_id: uuid.UUID,
    service_ids: Iterable[uuid.UUID],
) -> set[uuid.UUID]:
    """Make ``service_ids`` the exact set of services this employee offers."""
    await assert_owned(session, Employee, employee_id, tenant_id)
    wanted = await assert_all_owned(session, Service, service_ids, tenant_id)

    try:
        await session.execute(
            delete(EmployeeService).where(EmployeeService.employee_id == employee_id)
        )
        session.add_all(
            EmployeeService(employee_id=employee_id, service_id=sid) for sid in wanted
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return wanted


async def replace_for_service(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    service_id: uuid.UUID,
    employee_ids: Iterable[uuid.UUID],
) -> set[uuid.UUID]:
    """Make ``employee_ids`` the exact set of employees offering this service."""
    await assert_owned(session, Service, service_id, tenant_id)
    wanted = await assert_all_owned(session, Employee, employee_ids, tenant_id)

    try:
        await session.execute(
            delete(EmployeeService).where(EmployeeService.service_id == service_id)
        )
        session.add_all(
            EmployeeService(employee_id=eid, service_id=service_id) for eid in wanted
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return wanted


async def services_for_employee(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    employee_id: uuid.UUID,
) -> list[uuid.UUID]:
    await assert_owned(session, Employee, employee_id, tenant_id)
    stmt = select(EmployeeService.service_id).where(
        EmployeeService.employee_id == employee_id
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def employees_by_service(
    session: AsyncSession,
    service_ids: list[uuid.UUID],
) -> dict[uuid.UUID, list[uuid.UUID]]:
    """Map each service id to its assigned employee ids.

    Callers pass ids they already loaded for the tenant.
    """
    mapping: dict[uuid.UUID, list[uuid.UUID]] = {sid: [] for sid in service_ids}
    if not service_ids:
        return mapping
    stmt = select(EmployeeService).where(
        EmployeeService.service_id.in_(service_ids)  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    for link in result.scalars().all():
        mapping[link.service_id].append(link.employee_id)
    return mapping
