"""
Service tests for month-over-month trends.
"""

from datetime import date
from decimal import Decimal

import pytest

from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.database.store import SQLAlchemyCarbonStore
from carbon_tracker.pydantic_models.analytics import ScopeTotals, TrendPoint
from carbon_tracker.services.aggregators.trend_builder import (
    TrendBuilder,
    change_between,
    month_label,
    months_ending_at,
    summarize_trend,
)
from carbon_tracker.test.factory.activity_category import ActivityCategoryFactory
from carbon_tracker.test.factory.activity_log import ActivityLogFactory
from carbon_tracker.test.factory.business import BusinessFactory
from carbon_tracker.utils.constants import TrendDirection


def test_months_ending_at_crosses_year_boundary():
    assert months_ending_at(date(2026, 2, 14), 3) == [(12, 2025), (1, 2026), (2, 2026)]
    assert months_ending_at(date(2026, 3, 31), 1) == [(3, 2026)]
    assert len(months_ending_at(date(2026, 3, 1), 12)) == 12
    assert months_ending_at(date(2026, 3, 1), 12)[0] == (4, 2025)


def test_month_label():
    assert month_label(3, 2026) == "March 2026"


@pytest.mark.parametrize(
    "previous,current,change,direction",
    [
        ("100", "150", Decimal("50.00"), TrendDirection.INCREASED),
        ("150", "0", Decimal("-100.00"), TrendDirection.DECREASED),
        ("100", "100", Decimal("0.00"), TrendDirection.NO_CHANGE),
        ("0", "100", None, TrendDirection.NO_PREVIOUS_DATA),
        ("3", "1", Decimal("-66.67"), TrendDirection.DECREASED),
    ],
)
def test_change_between(previous, current, change, direction):
    assert change_between(Decimal(previous), Decimal(current)) == (change, direction)


@pytest.mark.asyncio
async def test_trend_over_three_months(test_db_session):
    business = await BusinessFactory()
    category = await ActivityCategoryFactory()

    await ActivityLogFactory(
        business_id=business.id,
        category_id=category.id,
        co2_emission=Decimal("100.0000"),
        date=date(2026, 1, 20),
    )
    await ActivityLogFactory(
        business_id=business.id,
        category_id=category.id,
        co2_emission=Decimal("150.0000"),
        date=date(2026, 2, 3),
    )

    builder = TrendBuilder(SQLAlchemyCarbonStore(test_db_session))
    points = await builder.trend(business.id, 3, today=date(2026, 3, 15))

    assert [(p.month, p.year) for p in points] == [(1, 2026), (2, 2026), (3, 2026)]
    assert [p.label for p in points] == ["January 2026", "February 2026", "March 2026"]
    assert [p.total_co2 for p in points] == [
        Decimal("100.0000"),
        Decimal("150.0000"),
        Decimal("0"),
    ]

    assert points[0].change_from_previous_month is None
    assert points[0].direction is None
    assert points[1].change_from_previous_month == Decimal("50.00")
    assert points[1].direction == TrendDirection.INCREASED
    assert points[2].change_from_previous_month == Decimal("-100.00")
    assert points[2].direction == TrendDirection.DECREASED

    summary = summarize_trend(points)
    assert summary.months == 3
    assert summary.overall_change == Decimal("-100.00")
    assert summary.overall_direction == "Emissions decreased"
    assert summary.total_co2 == Decimal("250.0000")


@pytest.mark.asyncio
async def test_trend_after_empty_month(test_db_session):
    business = await BusinessFactory()
    category = await ActivityCategoryFactory()

    await ActivityLogFactory(
        business_id=business.id,
        category_id=category.id,
        co2_emission=Decimal("80.0000"),
        date=date(2026, 3, 2),
    )

    builder = TrendBuilder(SQLAlchemyCarbonStore(test_db_session))
    points = await builder.trend(business.id, 2, today=date(2026, 3, 15))

    assert points[1].change_from_previous_month is None
    assert points[1].direction == TrendDirection.NO_PREVIOUS_DATA

    summary = summarize_trend(points)
    assert summary.overall_change is None
    assert summary.overall_direction == "Insufficient data"


@pytest.mark.asyncio
async def test_trend_single_month(test_db_session):
    business = await BusinessFactory()

    builder = TrendBuilder(SQLAlchemyCarbonStore(test_db_session))
    points = await builder.trend(business.id, 1, today=date(2026, 3, 15))

    assert len(points) == 1
    assert points[0].direction is None


@pytest.mark.asyncio
@pytest.mark.parametrize("months_back", [0, -1, 13])
async def test_trend_rejects_out_of_range_window(test_db_session, months_back):
    builder = TrendBuilder(SQLAlchemyCarbonStore(test_db_session), max_months=12)

    with pytest.raises(InvalidInputError):
        await builder.trend((await BusinessFactory()).id, months_back)


def test_summarize_unchanged_trend():
    def point(month, total):
        return TrendPoint(
            month=month,
            year=2026,
            total_co2=Decimal(total),
            by_scope=ScopeTotals(
                scope1=Decimal(total), scope2=Decimal("0"), scope3=Decimal("0")
            ),
            log_count=1,
            label=month_label(month, 2026),
        )

    summary = summarize_trend([point(1, "40.0000"), point(2, "40.0000")])

    assert summary.overall_change == Decimal("0.00")
    assert summary.overall_direction == "Emissions unchanged"
