"""Weekly availability — replace-on-write slot sets per employee."""

import logging
import uuid
from collections.abc import Mapping, Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bookdesk.models.availability import AvailabilitySlot, SlotIn, SlotRead
from bookdesk.models.employee import Employee
from bookdesk.services.guard import assert_owned

logger = logging.getLogger(__name__)


def build_slots(
    employee_id: uuid.UUID,
    schedule: Mapping[int, Sequence[SlotIn]],
) -> list[AvailabilitySlot]:
    """Turn an incoming weekly schedule into rows.

    Slots without a start or end, or whose end is not after the start, are
    dropped rather than failing the whole request.
    """
    rows: list[AvailabilitySlot] = []
    for day, slots in schedule.items():
        for slot in slots:
            if slot.start is None or slot.end is None:
                continue
            if slot.end <= slot.start:
                continue
            rows.append(AvailabilitySlot(
                employee_id=employee_id,
                day_of_week=day,
                start_time=slot.start,
                end_time=slot.end,
                is_available=slot.available,
            ))
    return rows


async def replace_all(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    employee_id: uuid.UUID,
    schedule: Mapping[int, Sequence[SlotIn]],
) -> int:
    """Swap the employee's whole slot set for ``schedule`` in one transaction.

    Returns the number of slots stored.
    """
    await assert_owned(session, Employee, employee_id, tenant_id)

    rows = build_slots(employee_id, schedule)
    try:
        await session.execute(
            delete(AvailabilitySlot).where(AvailabilitySlot.employee_id == employee_id)
        )
        session.add_all(rows)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Stored %d availability slots for employee %s", len(rows), employee_id)
    return len(rows)


async def get_schedule(
    session: AsyncSession,
    tenant_id: uuid.UUID,
    employee_id: uuid.UUID,
) -> dict[int, list[SlotRead]]:
    await assert_owned(session, Employee, employee_id, tenant_id)

    stmt = (
        select(AvailabilitySlot)
        .where(AvailabilitySlot.employee_id == employee_id)
        .order_by(AvailabilitySlot.day_of_week, AvailabilitySlot.start_time)  # type: ignore[arg-type]
    )
    result = await session.execute(stmt)

    grouped: dict[int, list[SlotRead]] = {}
    for row in result.scalars().all():
        grouped.setdefault(row.day_of_week, []).append(
            SlotRead(start=row.start_time, end=row.end_time, available=row.is_available)
        )
    return grouped
