"""API router aggregation."""

from fastapi import APIRouter

from bookdesk.api.v1.account import router as account_router
from bookdesk.api.v1.appointments import router as appointments_router
from bookdesk.api.v1.business import router as business_router
from bookdesk.api.v1.employees import router as employees_router
from bookdesk.api.v1.home import router as home_router
from bookdesk.api.v1.schedules import router as schedules_router
from bookdesk.api.v1.services import router as services_router

api_router = APIRouter(prefix="/api")
api_router.include_router(business_router)
api_router.include_router(account_router)
api_router.include_router(employees_router)
api_router.include_router(schedules_router)
api_router.include_router(services_router)
api_router.include_router(appointments_router)
api_router.include_router(home_router)
