"""
API tests for the calculation preview endpoint.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from carbon_tracker.database.repositories import (
    ActivityCategoryRepository,
    ActivityLogRepository,
)
from carbon_tracker.test.factory.activity_category import create_category_with_factor


@pytest.mark.asyncio
async def test_calculate_preview(test_async_client):
    electricity = await create_category_with_factor(
        factor="0.82", name="Electricity", unit="kWh", scope=2
    )

    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(electricity.id), "quantity": 1500},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["category_name"] == "Electricity"
    assert data["scope"] == 2
    assert data["co2_emission"] == "1230.0000"
    assert data["breakdown"]["result"] == "1230.0000 kg CO₂"
    assert data["breakdown"]["source"] == "Test Data"


@pytest.mark.asyncio
async def test_calculate_preview_stores_nothing(test_async_client, test_db_session):
    electricity = await create_category_with_factor(factor="0.82", unit="kWh", scope=2)

    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(electricity.id), "quantity": 10},
    )
    assert response.status_code == 200

    assert await ActivityLogRepository(test_db_session).count() == 0


@pytest.mark.asyncio
async def test_calculate_unknown_category(test_async_client):
    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(uuid4()), "quantity": 10},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [-1, "1e30", 10000000000])
async def test_calculate_invalid_quantity(test_async_client, quantity):
    electricity = await create_category_with_factor()

    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(electricity.id), "quantity": quantity},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_calculate_emission_too_large_to_store(test_async_client):
    petrol = await create_category_with_factor(factor="2.31")

    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(petrol.id), "quantity": 9000000000},
    )

    assert response.status_code == 400
    assert response.json()["context"]["category_id"] == str(petrol.id)


@pytest.mark.asyncio
async def test_calculate_store_failure(test_async_client, monkeypatch):
    async def lost_connection(self, category_id):
        raise OperationalError("SELECT", {}, ConnectionError("connection lost"))

    monkeypatch.setattr(ActivityCategoryRepository, "get_with_factor", lost_connection)

    response = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"category_id": str(uuid4()), "quantity": 10},
    )

    assert response.status_code == 503
    data = response.json()
    assert data["context"] == {"operation": "find_category_with_factor"}
    assert "connection lost" in data["detail"]
