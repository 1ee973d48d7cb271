"""Import all models so SQLModel.metadata picks them up."""

from bookdesk.models.appointment import (
    Appointment,
    AppointmentListItem,
    AppointmentRead,
    AppointmentWrite,
    DeleteOldRequest,
    DeleteOldResponse,
)
from bookdesk.models.assignment import (
    EmployeeService,
    EmployeeServicesRead,
    EmployeeServicesUpdate,
    ServiceAssignment,
)
from bookdesk.models.availability import AvailabilitySlot, SlotIn, SlotRead, WeeklySchedule
from bookdesk.models.business import Business, BusinessProfile, BusinessProfileUpdate
from bookdesk.models.employee import Employee, EmployeeCreate, EmployeeRead
from bookdesk.models.service import Service, ServiceCreate, ServiceRead

__all__ = [
    "Appointment",
    "AppointmentListItem",
    "AppointmentRead",
    "AppointmentWrite",
    "AvailabilitySlot",
    "Business",
    "BusinessProfile",
    "BusinessProfileUpdate",
    "DeleteOldRequest",
    "DeleteOldResponse",
    "Employee",
    "EmployeeCreate",
    "EmployeeRead",
    "EmployeeService",
    "EmployeeServicesRead",
    "EmployeeServicesUpdate",
    "Service",
    "ServiceAssignment",
    "ServiceCreate",
    "ServiceRead",
    "SlotIn",
    "SlotRead",
    "WeeklySchedule",
]
