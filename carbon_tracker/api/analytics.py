"""
Analytics API router.

Monthly aggregates, trends, category breakdowns and carbon intensity
scores. Everything is recomputed from the stored logs on each request.
"""

import logging
from datetime import date
from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from carbon_tracker.core.dependencies import get_analytics_settings, get_carbon_store
from carbon_tracker.core.exceptions import NotFoundError
from carbon_tracker.database.store import SQLAlchemyCarbonStore
from carbon_tracker.pydantic_models.analytics import (
    BenchmarkComparison,
    CategoryBreakdown,
    IntensityScore,
    MonthlyEmissions,
    ScoreHistoryEntry,
    TrendReport,
)
from carbon_tracker.services.aggregators.period_aggregator import (
    PeriodAggregator,
    build_category_breakdown,
)
from carbon_tracker.services.aggregators.trend_builder import (
    TrendBuilder,
    summarize_trend,
)
from carbon_tracker.services.scoring.intensity_scorer import IntensityScorer

router = APIRouter(
    prefix="/api/v1/businesses/{business_id}/analytics",
    tags=["Analytics"],
)

logger = logging.getLogger(__name__)


def _period(month: Optional[int], year: Optional[int]) -> tuple[int, int]:
    today = date.today()
    return (
        month if month is not None else today.month,
        year if year is not None else today.year,
    )


async def _require_business(store: SQLAlchemyCarbonStore, business_id: UUID):
    business = await store.find_business_by_id(business_id)
    if business is None:
        raise NotFoundError("Business profile not found", business_id=business_id)
    return business


@router.get("/monthly", response_model=MonthlyEmissions)
async def get_monthly_summary(
    business_id: UUID,
    month: Optional[int] = Query(None, description="Month (1-12), defaults to current"),
    year: Optional[int] = Query(None, description="Year, defaults to current"),
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """
    Emission totals of a month by scope and category.

    Example:
        ```
        GET /api/v1/businesses/{business_id}/analytics/monthly?month=3&year=2026
        ```
    """
    month, year = _period(month, year)
    await _require_business(store, business_id)
    return await PeriodAggregator(store).aggregate(business_id, month, year)


@router.get("/trends", response_model=TrendReport)
async def get_trends(
    business_id: UUID,
    months: Optional[int] = Query(
        None, description="Number of months ending with the current one"
    ),
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
    settings: dict[str, Any] = Depends(get_analytics_settings),
):
    """Month-over-month emission trend, oldest month first."""
    months_back = months if months is not None else settings["default_trend_months"]
    await _require_business(store, business_id)

    builder = TrendBuilder(store, max_months=settings["max_trend_months"])
    points = await builder.trend(business_id, months_back)
    return TrendReport(summary=summarize_trend(points), trend=points)


@router.get("/breakdown", response_model=CategoryBreakdown)
async def get_category_breakdown(
    business_id: UUID,
    month: Optional[int] = Query(None, description="Month (1-12), defaults to current"),
    year: Optional[int] = Query(None, description="Year, defaults to current"),
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """Categories of a month sorted by emissions, with the top emitter named."""
    month, year = _period(month, year)
    await _require_business(store, business_id)
    monthly = await PeriodAggregator(store).aggregate(business_id, month, year)
    return build_category_breakdown(monthly)


@router.get("/score", response_model=IntensityScore)
async def get_carbon_score(
    business_id: UUID,
    month: Optional[int] = Query(None, description="Month (1-12), defaults to current"),
    year: Optional[int] = Query(None, description="Year, defaults to current"),
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """Carbon intensity score of a month; the score is cached for the period."""
    month, year = _period(month, year)
    return await IntensityScorer(store).score(business_id, month, year)


@router.get("/benchmark", response_model=BenchmarkComparison)
async def get_benchmark_comparison(
    business_id: UUID,
    month: Optional[int] = Query(None, description="Month (1-12), defaults to current"),
    year: Optional[int] = Query(None, description="Year, defaults to current"),
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
    settings: dict[str, Any] = Depends(get_analytics_settings),
):
    """Score of a month against the industry benchmark plus recent score history."""
    month, year = _period(month, year)
    current = await IntensityScorer(store).score(business_id, month, year)
    history = await store.find_score_history(
        business_id, settings["score_history_limit"]
    )
    return BenchmarkComparison(
        current=current,
        history=[ScoreHistoryEntry.model_validate(entry) for entry in history],
    )
