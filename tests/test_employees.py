"""Employee CRUD, service assignment from the employee side, deletion cleanup."""

import uuid

import pytest
from httpx import AsyncClient
from sqlmodel import select

from bookdesk.models.assignment import EmployeeService
from bookdesk.models.availability import AvailabilitySlot
from tests.helpers import add_employee, add_service, register


@pytest.mark.asyncio
async def test_create_list_rename(client: AsyncClient):
    ctx = await register(client, "emp-crud")
    headers = ctx["headers"]

    await add_employee(client, headers, "Zoe")
    resp = await client.post("/api/employees/add", json={"name": "Anna"}, headers=headers)
    assert resp.status_code == 201
    anna = resp.json()
    assert anna["business_id"] == ctx["business_id"]

    resp = await client.get("/api/employees", headers=headers)
    assert [e["name"] for e in resp.json()] == ["Anna", "Zoe"]

    resp = await client.put(f"/api/employees/{anna['id']}", json={"name": "Anna K."}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Anna K."


@pytest.mark.asyncio
async def test_blank_name_rejected(client: AsyncClient):
    ctx = await register(client, "emp-blank")
    resp = await client.post("/api/employees", json={"name": ""}, headers=ctx["headers"])
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_tenant_isolation_employees(client: AsyncClient):
    ctx_a = await register(client, "emp-iso-a")
    ctx_b = await register(client, "emp-iso-b")
    emp = await add_employee(client, ctx_a["headers"])

    resp = await client.get("/api/employees", headers=ctx_b["headers"])
    assert resp.json() == []

    resp = await client.put(f"/api/employees/{emp}", json={"name": "X"}, headers=ctx_b["headers"])
    assert resp.status_code == 404

    resp = await client.delete(f"/api/employees/{emp}", headers=ctx_b["headers"])
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_packages_replace_and_dedupe(client: AsyncClient):
    ctx = await register(client, "emp-pkg")
    headers = ctx["headers"]
    emp = await add_employee(client, headers)
    cut = await add_service(client, headers, "Cut")
    dye = await add_service(client, headers, "Dye")

    resp = await client.post(
        f"/api/employees/{emp}/packages", json={"service_ids": [cut, cut, dye]}, headers=headers
    )
    assert resp.status_code == 200, resp.text
    assert sorted(resp.json()["service_ids"]) == sorted([cut, dye])

    resp = await client.post(f"/api/employees/{emp}/packages", json={"service_ids": [dye]}, headers=headers)
    assert resp.json()["service_ids"] == [dye]

    resp = await client.get(f"/api/employees/{emp}/packages", headers=headers)
    assert resp.json() == {"employee_id": emp, "service_ids": [dye]}


@pytest.mark.asyncio
async def test_packages_with_foreign_service_rejected_whole(client: AsyncClient):
    ctx_a = await register(client, "emp-pkg-own-a")
    ctx_b = await register(client, "emp-pkg-own-b")
    emp = await add_employee(client, ctx_a["headers"])
    mine = await add_service(client, ctx_a["headers"], "Mine")
    theirs = await add_service(client, ctx_b["headers"], "Theirs")

    await client.post(f"/api/employees/{emp}/packages", json={"service_ids": [mine]}, headers=ctx_a["headers"])

    resp = await client.post(
        f"/api/employees/{emp}/packages", json={"service_ids": [theirs]}, headers=ctx_a["headers"]
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"

    # Previous set untouched
    resp = await client.get(f"/api/employees/{emp}/packages", headers=ctx_a["headers"])
    assert resp.json()["service_ids"] == [mine]


@pytest.mark.asyncio
async def test_packages_for_foreign_employee_not_found(client: AsyncClient):
    ctx_a = await register(client, "emp-pkg-anchor-a")
    ctx_b = await register(client, "emp-pkg-anchor-b")
    emp_b = await add_employee(client, ctx_b["headers"])

    resp = await client.post(
        f"/api/employees/{emp_b}/packages", json={"service_ids": []}, headers=ctx_a["headers"]
    )
    assert resp.status_code == 404
    resp = await client.get(f"/api/employees/{emp_b}/packages", headers=ctx_a["headers"])
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_removes_slots_and_assignments(client: AsyncClient, session):
    ctx = await register(client, "emp-delete")
    headers = ctx["headers"]
    emp = await add_employee(client, headers)
    svc = await add_service(client, headers)
    await client.post(f"/api/employees/{emp}/packages", json={"service_ids": [svc]}, headers=headers)
    await client.post(
        f"/api/employees/{emp}/schedule",
        json={"schedule": {"0": [{"start": "09:00", "end": "17:00"}]}},
        headers=headers,
    )

    resp = await client.delete(f"/api/employees/{emp}", headers=headers)
    assert resp.status_code == 204

    emp_id = uuid.UUID(emp)
    slots = await session.execute(select(AvailabilitySlot).where(AvailabilitySlot.employee_id == emp_id))
    assert slots.scalars().all() == []
    links = await session.execute(select(EmployeeService).where(EmployeeService.employee_id == emp_id))
    assert links.scalars().all() == []

    resp = await client.get("/api/employees", headers=headers)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_delete_blocked_while_booked(client: AsyncClient):
    ctx = await register(client, "emp-booked")
    headers = ctx["headers"]
    emp = await add_employee(client, headers)
    svc = await add_service(client, headers)
    resp = await client.post("/api/appointments", json={
        "employee_id": emp,
        "service_id": svc,
        "client_name": "Client",
        "starts_at": "2026-12-01T10:00:00",
    }, headers=headers)
    assert resp.status_code == 201

    resp = await client.delete(f"/api/employees/{emp}", headers=headers)
    assert resp.status_code == 409
