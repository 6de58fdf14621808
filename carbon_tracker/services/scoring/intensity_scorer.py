"""
Carbon intensity scoring service.

Compares a month's emissions with the business's industry benchmark and
caches the resulting score.
"""

import logging
from decimal import Decimal
from uuid import UUID

from carbon_tracker.core.exceptions import (
    ConfigurationError,
    MissingBenchmarkError,
    NotFoundError,
)
from carbon_tracker.pydantic_models.analytics import IntensityScore
from carbon_tracker.services.aggregators.period_aggregator import (
    PeriodAggregator,
    validate_period,
)
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.services.ports import CarbonStore
from carbon_tracker.utils.constants import (
    BENCHMARK_PENALTY,
    MAX_SCORE,
    MIN_SCORE,
    PERFORMANCE_BANDS,
    PerformanceLabel,
)

logger = logging.getLogger(__name__)


def performance_label(score: Decimal) -> str:
    """Qualitative band of a score; each band includes its lower bound."""
    for threshold, label in PERFORMANCE_BANDS:
        if score >= threshold:
            return label
    return PerformanceLabel.CRITICAL


def compute_score(total_co2: Decimal, benchmark_co2: Decimal) -> Decimal:
    """
    Score emissions against a benchmark on a 0-100 scale.

    Zero emissions score 100, emitting exactly the benchmark scores 50 and
    anything at or above twice the benchmark floors at 0.
    """
    if total_co2 == 0:
        return Precision.percent(MAX_SCORE)
    raw = MAX_SCORE - total_co2 / benchmark_co2 * BENCHMARK_PENALTY
    return Precision.percent(min(MAX_SCORE, max(MIN_SCORE, raw)))


def interpret(
    total_co2: Decimal, percentage_vs_benchmark: Decimal, industry: str
) -> str:
    if total_co2 == 0:
        return "No emissions logged for this period"
    gap = Precision.percent(abs(percentage_vs_benchmark - Precision.HUNDRED))
    if percentage_vs_benchmark < Precision.HUNDRED:
        return f"Your emissions are {gap}% below the {industry} industry average"
    if percentage_vs_benchmark > Precision.HUNDRED:
        return f"Your emissions are {gap}% above the {industry} industry average"
    return f"Your emissions match the {industry} industry average"


class IntensityScorer:
    """
    Service computing the carbon intensity score of a business month.

    The score is a snapshot of the latest computation: every call overwrites
    the cached row for the period.
    """

    def __init__(self, store: CarbonStore):
        self.store = store
        self.aggregator = PeriodAggregator(store)

    async def score(self, business_id: UUID, month: int, year: int) -> IntensityScore:
        """
        Score a month and cache the result.

        Args:
            business_id: Business UUID
            month: Month (1-12)
            year: Year

        Returns:
            IntensityScore

        Raises:
            InvalidInputError: If the period is invalid
            NotFoundError: If the business does not exist
            MissingBenchmarkError: If the business's industry has no benchmark
            ConfigurationError: If the benchmark is not positive
        """
        validate_period(month, year)

        business = await self.store.find_business_by_id(business_id)
        if business is None:
            raise NotFoundError(
                "Business profile not found", business_id=business_id
            )

        benchmark = await self.store.find_benchmark_by_industry(business.industry)
        if benchmark is None:
            logger.error(
                f"No benchmark for industry '{business.industry}' "
                f"(business {business_id})"
            )
            raise MissingBenchmarkError(
                f"No benchmark found for industry: {business.industry}",
                industry=business.industry,
                business_id=business_id,
            )

        benchmark_co2 = Precision.normalize_number(benchmark.avg_monthly_emissions)
        if benchmark_co2 <= 0:
            logger.error(f"Benchmark for '{business.industry}' is {benchmark_co2}")
            raise ConfigurationError(
                f"Benchmark for industry {business.industry} must be positive",
                industry=business.industry,
            )

        monthly = await self.aggregator.aggregate(business_id, month, year)
        total_co2 = monthly.total_co2

        score = compute_score(total_co2, benchmark_co2)
        percentage_vs_benchmark = Precision.share(total_co2, benchmark_co2)

        await self.store.upsert_score(business_id, month, year, score)
        logger.info(
            f"Scored business {business_id} for {year}-{month:02d}: {score} "
            f"({total_co2} vs {benchmark_co2} kg CO2)"
        )

        return IntensityScore(
            month=month,
            year=year,
            industry=business.industry,
            score=score,
            performance_label=performance_label(score),
            total_co2=total_co2,
            benchmark_co2=benchmark_co2,
            percentage_vs_benchmark=percentage_vs_benchmark,
            difference=Precision.mass(total_co2 - benchmark_co2),
            interpretation=interpret(
                total_co2, percentage_vs_benchmark, business.industry
            ),
        )
