"""Tenant ownership guard.

Every write that takes an Employee or Service id from the caller passes it
through here first. A missing row and a row owned by another business raise
the same error, so ids from other tenants cannot be probed.
"""

import uuid
from collections.abc import Iterable
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from bookdesk.core.errors import OwnershipError, ValidationError

T = TypeVar("T", bound=SQLModel)


def _label(model: type[SQLModel]) -> str:
    return model.__name__


async def assert_owned(
    session: AsyncSession,
    model: type[T],
    obj_id: uuid.UUID,
    tenant_id: uuid.UUID,
) -> T:
    """Return the row if it exists and belongs to ``tenant_id``."""
    stmt = select(model).where(
        model.id == obj_id,  # type: ignore[attr-defined]
        model.business_id == tenant_id,  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    row = result.scalar_one_or_none()
    if row is None:
        raise OwnershipError(f"{_label(model)} not found")
    return row


async def assert_all_owned(
    session: AsyncSession,
    model: type[SQLModel],
    ids: Iterable[uuid.UUID],
    tenant_id: uuid.UUID,
) -> set[uuid.UUID]:
    """Validate a set of ids at once; one foreign id rejects the whole set."""
    wanted = set(ids)
    if not wanted:
        return wanted

    stmt = select(model.id).where(  # type: ignore[attr-defined]
        model.id.in_(wanted),  # type: ignore[attr-defined]
        model.business_id == tenant_id,  # type: ignore[attr-defined]
    )
    result = await session.execute(stmt)
    found = set(result.scalars().all())
    if found != wanted:
        raise ValidationError(
            f"One or more {_label(model).lower()}s were not found in this business"
        )
    return wanted
