"""Request helpers shared by the API tests."""

from httpx import AsyncClient


async def register(client: AsyncClient, slug: str, **extra) -> dict:
    """Register a business and return its id plus auth headers."""
    payload = {
        "name": f"{slug} Studio",
        "email": f"owner@{slug}.com",
        "password": "password123",
        "phone": "+30 210 0000000",
        "address": "1 Main St",
        "category": "salon",
        **extra,
    }
    resp = await client.post("/api/business/register", json=payload)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    return {
        "business_id": data["business_id"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
        "email": payload["email"],
    }


async def add_employee(client: AsyncClient, headers: dict, name: str = "Maria") -> str:
    resp = await client.post("/api/employees", json={"name": name}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


async def add_service(
    client: AsyncClient,
    headers: dict,
    title: str = "Haircut",
    price: str = "25.00",
    duration: int = 30,
) -> str:
    resp = await client.post("/api/services", json={
        "title": title,
        "price": price,
        "duration": duration,
    }, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
