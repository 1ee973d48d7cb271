"""EmployeeService — many-to-many link between employees and services."""

import uuid

from sqlmodel import Field, SQLModel


class EmployeeService(SQLModel, table=True):
    __tablename__ = "employee_services"

    # Composite key: one row per (employee, service) pair
    employee_id: uuid.UUID = Field(foreign_key="employees.id", primary_key=True)
    service_id: uuid.UUID = Field(foreign_key="services.id", primary_key=True)


# ── Pydantic schemas ─────────────────────────────────────────

class EmployeeServicesUpdate(SQLModel):
    service_ids: list[uuid.UUID]


class ServiceAssignment(SQLModel):
    service_id: uuid.UUID
    employee_ids: list[uuid.UUID]


class EmployeeServicesRead(SQLModel):
    employee_id: uuid.UUID
    service_ids: list[uuid.UUID]
