"""
API tests for the category catalog endpoints.
"""

from uuid import uuid4

import pytest

from carbon_tracker.test.factory.activity_category import create_category_with_factor


async def _seed_catalog():
    diesel = await create_category_with_factor(
        factor="2.68", name="Diesel", unit="litres", scope=1
    )
    electricity = await create_category_with_factor(
        factor="0.82", name="Electricity", unit="kWh", scope=2
    )
    flights = await create_category_with_factor(
        factor="0.255", name="Business Air Travel", unit="km", scope=3
    )
    return diesel, electricity, flights


@pytest.mark.asyncio
async def test_list_categories_grouped_by_scope(test_async_client):
    await _seed_catalog()

    response = await test_async_client.get("/api/v1/categories")
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == 3
    assert [group["scope"] for group in data["scopes"]] == [1, 2, 3]
    assert data["scopes"][0]["scope_name"] == "Direct Emissions"
    assert data["scopes"][1]["categories"][0]["name"] == "Electricity"
    assert data["scopes"][1]["categories"][0]["emission_factor"]["unit"] == (
        "kg CO2 per kWh"
    )


@pytest.mark.asyncio
async def test_list_categories_empty_catalog(test_async_client):
    response = await test_async_client.get("/api/v1/categories")

    assert response.status_code == 200
    assert response.json() == {"total": 0, "scopes": []}


@pytest.mark.asyncio
async def test_list_categories_by_scope(test_async_client):
    await _seed_catalog()

    response = await test_async_client.get("/api/v1/categories/scope/3")
    assert response.status_code == 200

    data = response.json()
    assert data["scope"] == 3
    assert data["scope_name"] == "Value Chain"
    assert [c["name"] for c in data["categories"]] == ["Business Air Travel"]


@pytest.mark.asyncio
@pytest.mark.parametrize("scope", [0, 4])
async def test_list_categories_invalid_scope(test_async_client, scope):
    response = await test_async_client.get(f"/api/v1/categories/scope/{scope}")

    assert response.status_code == 400
    assert response.json()["context"] == {"scope": str(scope)}


@pytest.mark.asyncio
async def test_get_category(test_async_client):
    diesel, _, _ = await _seed_catalog()

    response = await test_async_client.get(f"/api/v1/categories/{diesel.id}")
    assert response.status_code == 200

    data = response.json()
    assert data["id"] == str(diesel.id)
    assert data["scope"] == 1
    assert float(data["emission_factor"]["factor"]) == 2.68


@pytest.mark.asyncio
async def test_get_category_not_found(test_async_client):
    response = await test_async_client.get(f"/api/v1/categories/{uuid4()}")

    assert response.status_code == 404
    assert "Category not found" in response.json()["detail"]
