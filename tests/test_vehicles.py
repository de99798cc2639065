import pytest
from httpx import ASGITransport, AsyncClient

from vehicle_api.dependencies import get_vehicle_service
from vehicle_api.main import app


@pytest.mark.asyncio
async def test_get_vehicles_returns_list(client, service):
    await service.create_vehicle("car", "A4", "Audi", "2016-06-15")
    await service.create_vehicle("bus", "XC90", "Volvo", "2015-01-07")

    response = await client.get("/api/v1/vehicles", params={"count": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert isinstance(body["data"], list)
    assert len(body["data"]) == 2


@pytest.mark.asyncio
async def test_get_vehicles_item_format(client, service):
    await service.create_vehicle("car", "A4", "Audi", "2016-06-15")

    response = await client.get("/api/v1/vehicles")

    vehicle = response.json()["data"][0]
    assert vehicle == {
        "id": vehicle["id"],
        "type": "car",
        "modelCode": "A4",
        "brandName": "Audi",
        "launchDate": "2016-06-15",
    }


@pytest.mark.asyncio
async def test_get_vehicles_negative_count(client):
    response = await client.get("/api/v1/vehicles", params={"count": -1})

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["data"] == {"field": "count"}


@pytest.mark.asyncio
async def test_get_vehicle_by_id(client, service):
    created = await service.create_vehicle("truck", "Actros", "Mercedes-Benz", "2019-09-02")

    response = await client.get(f"/api/v1/vehicles/{created.id}")

    assert response.status_code == 200
    assert response.json()["data"]["modelCode"] == "Actros"


@pytest.mark.asyncio
async def test_get_vehicle_missing_returns_null(client):
    response = await client.get("/api/v1/vehicles/424242")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": None, "message": None}


@pytest.mark.asyncio
async def test_create_vehicle(client, service):
    response = await client.post(
        "/api/v1/vehicles",
        json={"type": "car", "modelCode": "Civic", "brandName": "Honda", "launchDate": "2017-03-21"},
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["modelCode"] == "Civic"
    assert data["launchDate"] == "2017-03-21"
    assert await service.count_vehicles() == 1


@pytest.mark.asyncio
async def test_create_vehicle_invalid_date(client, service):
    response = await client.post(
        "/api/v1/vehicles",
        json={"type": "car", "modelCode": "Civic", "brandName": "Honda", "launchDate": "13/2020"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert "13/2020" in body["message"]
    assert await service.count_vehicles() == 0


class _BrokenService:
    async def get_all_vehicles(self, count):
        raise RuntimeError("database unavailable")


@pytest.mark.asyncio
async def test_storage_failure_returns_generic_error():
    app.dependency_overrides[get_vehicle_service] = lambda: _BrokenService()
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/vehicles")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"status": "error", "data": None, "message": "Internal server error"}
