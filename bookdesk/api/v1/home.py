"""Dashboard summary endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import func
from sqlmodel import select

from bookdesk.api.deps import Auth, Session
from bookdesk.models.appointment import AppointmentListItem
from bookdesk.models.base import utcnow
from bookdesk.models.employee import Employee
from bookdesk.models.service import Service
from bookdesk.services import appointments

router = APIRouter(prefix="/home", tags=["home"])


class CountResponse(BaseModel):
    count: int


@router.get("/appointments/today", response_model=list[AppointmentListItem])
async def todays_appointments(auth: Auth, session: Session) -> list[AppointmentListItem]:
    """Appointments starting on the current UTC day."""
    return await appointments.list_for_day(session, auth.tenant_id, utcnow().date())


@router.get("/employees/count", response_model=CountResponse)
async def employee_count(auth: Auth, session: Session) -> CountResponse:
    count = (await session.execute(
        select(func.count()).select_from(Employee).where(Employee.business_id == auth.tenant_id)
    )).scalar_one()
    return CountResponse(count=count)


@router.get("/services/count", response_model=CountResponse)
async def service_count(auth: Auth, session: Session) -> CountResponse:
    count = (await session.execute(
        select(func.count()).select_from(Service).where(Service.business_id == auth.tenant_id)
    )).scalar_one()
    return CountResponse(count=count)
