"""
Period Aggregation Service.

Reduces the logs of one business and one calendar month into totals by
scope and by category. Always recomputed from stored logs; there are no
pre-aggregated rollups.
"""

import calendar
import logging
from datetime import date
from decimal import Decimal
from uuid import UUID

from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.pydantic_models.analytics import (
    CategoryBreakdown,
    CategoryBreakdownItem,
    CategoryTotal,
    MonthlyEmissions,
    ScopeTotals,
)
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.services.ports import CarbonStore
from carbon_tracker.utils.constants import Scope

logger = logging.getLogger(__name__)


def validate_period(month: int, year: int) -> None:
    """
    Check a (month, year) pair addresses a real calendar month.

    Raises:
        InvalidInputError: If month is outside 1-12 or year outside 1-9999
    """
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidInputError("Month must be between 1 and 12", month=month)
    if not isinstance(year, int) or not 1 <= year <= 9999:
        raise InvalidInputError("Year must be between 1 and 9999", year=year)


def month_window(month: int, year: int) -> tuple[date, date]:
    """
    First and last day of a calendar month, both inclusive.

    Example:
        >>> month_window(2, 2024)
        (datetime.date(2024, 2, 1), datetime.date(2024, 2, 29))
    """
    validate_period(month, year)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


class PeriodAggregator:
    """
    Service for aggregating the emissions of a calendar month.

    Per-log amounts are frozen at 4 places, so summing them as Decimals is
    exact; totals are quantized once at the end and repeated calls over the
    same logs always give the same figures.
    """

    def __init__(self, store: CarbonStore):
        self.store = store

    async def aggregate(
        self, business_id: UUID, month: int, year: int
    ) -> MonthlyEmissions:
        """
        Aggregate emissions of a business for one month.

        Args:
            business_id: Business UUID
            month: Month (1-12)
            year: Year

        Returns:
            MonthlyEmissions; a month without logs yields zeros and an empty
            category mapping
        """
        start, end = month_window(month, year)
        logs = await self.store.find_logs_by_business_and_date_range(
            business_id, start, end
        )

        total = Decimal("0")
        by_scope = {scope: Decimal("0") for scope in Scope.ALL}
        category_totals: dict[str, Decimal] = {}
        category_counts: dict[str, int] = {}

        for log in logs:
            amount = Precision.normalize_number(log.co2_emission)
            total += amount
            if log.scope in by_scope:
                by_scope[log.scope] += amount
            else:
                logger.warning(f"Log {log.id} has unknown scope {log.scope}")

            name = log.category.name
            category_totals[name] = category_totals.get(name, Decimal("0")) + amount
            category_counts[name] = category_counts.get(name, 0) + 1

        by_category = {
            name: CategoryTotal(
                total=Precision.mass(amount),
                count=category_counts[name],
                percentage=Precision.share(amount, total),
            )
            for name, amount in category_totals.items()
        }

        logger.debug(
            f"Aggregated {len(logs)} logs for business {business_id} "
            f"in {year}-{month:02d}: {total} kg CO2"
        )

        return MonthlyEmissions(
            month=month,
            year=year,
            total_co2=Precision.mass(total),
            by_scope=ScopeTotals(
                scope1=Precision.mass(by_scope[Scope.SCOPE_1]),
                scope2=Precision.mass(by_scope[Scope.SCOPE_2]),
                scope3=Precision.mass(by_scope[Scope.SCOPE_3]),
            ),
            by_category=by_category,
            log_count=len(logs),
        )


def build_category_breakdown(monthly: MonthlyEmissions) -> CategoryBreakdown:
    """
    Sort a month's categories by emissions, largest first, and name the top one.
    """
    items = sorted(
        (
            CategoryBreakdownItem(
                category=name,
                total=data.total,
                count=data.count,
                percentage=data.percentage,
            )
            for name, data in monthly.by_category.items()
        ),
        key=lambda item: (-item.total, item.category),
    )

    if items:
        top = items[0]
        insight = (
            f"{top.category} is your biggest emission source "
            f"at {top.percentage}% of total emissions"
        )
    else:
        insight = "No emissions logged for this period"

    return CategoryBreakdown(
        month=monthly.month,
        year=monthly.year,
        total_co2=monthly.total_co2,
        categories=items,
        insight=insight,
    )
