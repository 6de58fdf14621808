"""
API tests for analytics endpoints.
"""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from carbon_tracker.test.factory.activity_category import (
    ActivityCategoryFactory,
    ElectricityCategoryFactory,
)
from carbon_tracker.test.factory.activity_log import (
    ActivityLogFactory,
    CarbonIntensityScoreFactory,
)
from carbon_tracker.test.factory.business import (
    BusinessFactory,
    IndustryBenchmarkFactory,
)


def _analytics_url(business_id, endpoint):
    return f"/api/v1/businesses/{business_id}/analytics/{endpoint}"


async def _march_2026_business():
    """Petrol 50 kg and electricity 150 kg in March 2026, benchmark 1000 kg."""
    await IndustryBenchmarkFactory(
        industry="Restaurant", avg_monthly_emissions=Decimal("1000.00")
    )
    business = await BusinessFactory(industry="Restaurant")
    petrol = await ActivityCategoryFactory(name="Petrol", scope=1)
    electricity = await ElectricityCategoryFactory(name="Electricity")

    await ActivityLogFactory(
        business_id=business.id,
        category_id=petrol.id,
        scope=1,
        co2_emission=Decimal("50.0000"),
        date=date(2026, 3, 5),
    )
    await ActivityLogFactory(
        business_id=business.id,
        category_id=electricity.id,
        scope=2,
        co2_emission=Decimal("150.0000"),
        date=date(2026, 3, 25),
    )
    return business


@pytest.mark.asyncio
async def test_monthly_summary(test_async_client):
    business = await _march_2026_business()

    response = await test_async_client.get(
        _analytics_url(business.id, "monthly"), params={"month": 3, "year": 2026}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["total_co2"] == "200.0000"
    assert data["by_scope"] == {
        "scope1": "50.0000",
        "scope2": "150.0000",
        "scope3": "0.0000",
    }
    assert data["by_category"]["Electricity"]["percentage"] == "75.00"
    assert data["log_count"] == 2
    assert data["unit"] == "kg CO₂"


@pytest.mark.asyncio
async def test_monthly_summary_invalid_month(test_async_client):
    business = await BusinessFactory()

    response = await test_async_client.get(
        _analytics_url(business.id, "monthly"), params={"month": 13, "year": 2026}
    )

    assert response.status_code == 400
    assert response.json()["context"] == {"month": "13"}


@pytest.mark.asyncio
async def test_monthly_summary_unknown_business(test_async_client):
    response = await test_async_client.get(_analytics_url(uuid4(), "monthly"))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_trends_defaults_to_six_months(test_async_client):
    business = await BusinessFactory()

    response = await test_async_client.get(_analytics_url(business.id, "trends"))
    assert response.status_code == 200

    data = response.json()
    assert data["summary"]["months"] == 6
    assert len(data["trend"]) == 6
    assert data["trend"][0]["change_from_previous_month"] is None
    assert data["summary"]["overall_direction"] == "Insufficient data"

    today = date.today()
    assert (data["trend"][-1]["month"], data["trend"][-1]["year"]) == (
        today.month,
        today.year,
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("months", [0, 13])
async def test_trends_out_of_range(test_async_client, months):
    business = await BusinessFactory()

    response = await test_async_client.get(
        _analytics_url(business.id, "trends"), params={"months": months}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_breakdown(test_async_client):
    business = await _march_2026_business()

    response = await test_async_client.get(
        _analytics_url(business.id, "breakdown"), params={"month": 3, "year": 2026}
    )
    assert response.status_code == 200

    data = response.json()
    assert [item["category"] for item in data["categories"]] == [
        "Electricity",
        "Petrol",
    ]
    assert data["insight"] == (
        "Electricity is your biggest emission source at 75.00% of total emissions"
    )


@pytest.mark.asyncio
async def test_score_march_2026(test_async_client):
    business = await _march_2026_business()

    response = await test_async_client.get(
        _analytics_url(business.id, "score"), params={"month": 3, "year": 2026}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["score"] == "90.00"
    assert data["performance_label"] == "Excellent"
    assert data["percentage_vs_benchmark"] == "20.00"
    assert data["difference"] == "-800.0000"
    assert data["interpretation"] == (
        "Your emissions are 80.00% below the Restaurant industry average"
    )


@pytest.mark.asyncio
async def test_score_missing_benchmark(test_async_client):
    business = await BusinessFactory(industry="Retired Industry")

    response = await test_async_client.get(
        _analytics_url(business.id, "score"), params={"month": 3, "year": 2026}
    )

    assert response.status_code == 500
    assert "No benchmark found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_benchmark_comparison_with_history(test_async_client):
    business = await _march_2026_business()
    await CarbonIntensityScoreFactory(
        business_id=business.id, month=2, year=2026, score=Decimal("62.50")
    )
    await CarbonIntensityScoreFactory(
        business_id=business.id, month=3, year=2026, score=Decimal("10.00")
    )

    response = await test_async_client.get(
        _analytics_url(business.id, "benchmark"), params={"month": 3, "year": 2026}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["current"]["score"] == "90.00"
    # The cached March score is overwritten by the fresh computation
    assert [(h["month"], h["score"]) for h in data["history"]] == [
        (3, "90.00"),
        (2, "62.50"),
    ]
