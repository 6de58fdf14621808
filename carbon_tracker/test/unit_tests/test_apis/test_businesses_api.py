"""
API tests for business profile endpoints.
"""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from carbon_tracker.test.factory.activity_category import ActivityCategoryFactory
from carbon_tracker.test.factory.activity_log import ActivityLogFactory
from carbon_tracker.test.factory.business import (
    BusinessFactory,
    IndustryBenchmarkFactory,
)


def _payload(**overrides):
    payload = {
        "user_id": str(uuid4()),
        "name": "Spice Route Kitchen",
        "industry": "Restaurant",
        "location": "Pune",
        "employee_count": 18,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_list_industries(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant", avg_monthly_emissions=Decimal("2850.00"))
    await IndustryBenchmarkFactory(industry="Office", avg_monthly_emissions=Decimal("980.00"))

    response = await test_async_client.get("/api/v1/businesses/industries")
    assert response.status_code == 200

    data = response.json()
    assert [item["industry"] for item in data] == ["Office", "Restaurant"]
    assert Decimal(data[1]["avg_monthly_emissions"]) == Decimal("2850")


@pytest.mark.asyncio
async def test_create_business(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant", avg_monthly_emissions=Decimal("2850.00"))

    response = await test_async_client.post("/api/v1/businesses", json=_payload())
    assert response.status_code == 201

    data = response.json()
    assert data["business"]["name"] == "Spice Route Kitchen"
    assert data["business"]["industry"] == "Restaurant"
    assert data["benchmark"]["industry"] == "Restaurant"
    assert data["message"] == "Your industry average is 2850.00 kg CO₂/month"


@pytest.mark.asyncio
async def test_create_business_twice_for_same_user(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant")
    payload = _payload()

    first = await test_async_client.post("/api/v1/businesses", json=payload)
    assert first.status_code == 201

    second = await test_async_client.post(
        "/api/v1/businesses", json={**payload, "name": "Second Kitchen"}
    )
    assert second.status_code == 409
    assert second.json()["detail"] == "Business profile already exists"


@pytest.mark.asyncio
async def test_create_business_unknown_industry(test_async_client):
    response = await test_async_client.post(
        "/api/v1/businesses", json=_payload(industry="Space Tourism")
    )

    assert response.status_code == 400
    assert "Invalid industry" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_business_validation(test_async_client):
    response = await test_async_client.post(
        "/api/v1/businesses", json=_payload(employee_count=0)
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_business_profile(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant")
    business = await BusinessFactory(industry="Restaurant")
    category = await ActivityCategoryFactory()
    await ActivityLogFactory(
        business_id=business.id, category_id=category.id, date=date(2026, 3, 1)
    )
    await ActivityLogFactory(
        business_id=business.id, category_id=category.id, date=date(2026, 3, 2)
    )

    response = await test_async_client.get(f"/api/v1/businesses/{business.id}")
    assert response.status_code == 200

    data = response.json()
    assert data["business"]["id"] == str(business.id)
    assert data["benchmark"]["industry"] == "Restaurant"
    assert data["activity_log_count"] == 2


@pytest.mark.asyncio
async def test_get_business_not_found(test_async_client):
    response = await test_async_client.get(f"/api/v1/businesses/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_business_with_missing_benchmark(test_async_client):
    business = await BusinessFactory(industry="Retired Industry")

    response = await test_async_client.get(f"/api/v1/businesses/{business.id}")

    assert response.status_code == 500
    assert response.json()["context"]["industry"] == "Retired Industry"


@pytest.mark.asyncio
async def test_update_business(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant")
    await IndustryBenchmarkFactory(industry="Retail Store")
    business = await BusinessFactory(industry="Restaurant", location="Pune")

    response = await test_async_client.patch(
        f"/api/v1/businesses/{business.id}",
        json={"name": "Renamed Cafe", "industry": "Retail Store"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Renamed Cafe"
    assert data["industry"] == "Retail Store"
    assert data["location"] == "Pune"


@pytest.mark.asyncio
async def test_update_business_invalid_industry(test_async_client):
    await IndustryBenchmarkFactory(industry="Restaurant")
    business = await BusinessFactory(industry="Restaurant")

    response = await test_async_client.patch(
        f"/api/v1/businesses/{business.id}", json={"industry": "Space Tourism"}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_business_cannot_clear_name(test_async_client):
    business = await BusinessFactory()

    response = await test_async_client.patch(
        f"/api/v1/businesses/{business.id}", json={"name": None}
    )

    assert response.status_code == 400
    assert response.json()["context"] == {"field": "name"}


@pytest.mark.asyncio
async def test_update_business_not_found(test_async_client):
    response = await test_async_client.patch(
        f"/api/v1/businesses/{uuid4()}", json={"name": "Ghost"}
    )

    assert response.status_code == 404
