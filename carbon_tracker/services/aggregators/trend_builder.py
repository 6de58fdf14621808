"""
Trend Service.

Runs the period aggregator over consecutive calendar months and computes
month-over-month changes.
"""

import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.pydantic_models.analytics import TrendPoint, TrendSummary
from carbon_tracker.services.aggregators.period_aggregator import PeriodAggregator
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.services.ports import CarbonStore
from carbon_tracker.utils.constants import MAX_TREND_MONTHS, TrendDirection

logger = logging.getLogger(__name__)


def months_ending_at(today: date, months_back: int) -> list[tuple[int, int]]:
    """
    ``months_back`` consecutive (month, year) pairs ending at ``today``'s month.

    Oldest first.

    Example:
        >>> months_ending_at(date(2026, 2, 14), 3)
        [(12, 2025), (1, 2026), (2, 2026)]
    """
    # Months since year 0, so stepping back crosses year boundaries cleanly
    current = today.year * 12 + today.month - 1
    return [
        (index % 12 + 1, index // 12)
        for index in range(current - months_back + 1, current + 1)
    ]


def month_label(month: int, year: int) -> str:
    """Display label, e.g. ``March 2026``."""
    return f"{calendar.month_name[month]} {year}"


def change_between(
    previous: Decimal, current: Decimal
) -> tuple[Optional[Decimal], str]:
    """
    Percentage change from ``previous`` to ``current`` and its direction.

    A zero previous total has no defined change.
    """
    if previous == 0:
        return None, TrendDirection.NO_PREVIOUS_DATA

    change = Precision.percent((current - previous) / previous * Precision.HUNDRED)
    if change > 0:
        return change, TrendDirection.INCREASED
    if change < 0:
        return change, TrendDirection.DECREASED
    return change, TrendDirection.NO_CHANGE


class TrendBuilder:
    """
    Service for building emission trends.

    The whole window is computed eagerly; ``months_back`` is bounded so the
    work per request stays small.
    """

    def __init__(self, store: CarbonStore, max_months: int = MAX_TREND_MONTHS):
        self.store = store
        self.max_months = max_months
        self.aggregator = PeriodAggregator(store)

    async def trend(
        self,
        business_id: UUID,
        months_back: int,
        today: Optional[date] = None,
    ) -> list[TrendPoint]:
        """
        Build per-month aggregates for the last ``months_back`` months.

        Args:
            business_id: Business UUID
            months_back: Window size, 1 to ``max_months``
            today: Reference date, defaults to the current date

        Returns:
            TrendPoints oldest first; the first carries no change

        Raises:
            InvalidInputError: If months_back is out of range
        """
        if not isinstance(months_back, int) or not 1 <= months_back <= self.max_months:
            raise InvalidInputError(
                f"Months must be between 1 and {self.max_months}",
                months_back=months_back,
            )

        today = today or date.today()
        logger.info(
            f"Building {months_back}-month trend for business {business_id} "
            f"ending {today.year}-{today.month:02d}"
        )

        points: list[TrendPoint] = []
        previous: Optional[Decimal] = None
        for month, year in months_ending_at(today, months_back):
            monthly = await self.aggregator.aggregate(business_id, month, year)

            change, direction = None, None
            if previous is not None:
                change, direction = change_between(previous, monthly.total_co2)

            points.append(
                TrendPoint(
                    **monthly.model_dump(),
                    label=month_label(month, year),
                    change_from_previous_month=change,
                    direction=direction,
                )
            )
            previous = monthly.total_co2

        return points


def summarize_trend(points: list[TrendPoint]) -> TrendSummary:
    """
    Overall change between the first and last month of a trend.

    The change is undefined when the first month has no emissions.
    """
    total = sum((point.total_co2 for point in points), Decimal("0"))
    first = points[0].total_co2 if points else Decimal("0")
    last = points[-1].total_co2 if points else Decimal("0")

    if first == 0:
        overall_change = None
        overall_direction = "Insufficient data"
    else:
        overall_change = Precision.percent((last - first) / first * Precision.HUNDRED)
        if overall_change > 0:
            overall_direction = "Emissions increased"
        elif overall_change < 0:
            overall_direction = "Emissions decreased"
        else:
            overall_direction = "Emissions unchanged"

    return TrendSummary(
        months=len(points),
        overall_change=overall_change,
        overall_direction=overall_direction,
        total_co2=Precision.mass(total),
    )
