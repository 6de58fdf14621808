"""
SQLAlchemy implementation of the engine's persistence port.

Every call is bound to the request session; failures of the underlying
database surface as ``StoreFailureError`` and are not retried.
"""
import functools
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.exceptions import StoreFailureError
from carbon_tracker.database.repositories import (
    ActivityCategoryRepository,
    ActivityLogRepository,
    BusinessRepository,
    CarbonIntensityScoreRepository,
    IndustryBenchmarkRepository,
)
from carbon_tracker.database.schemas import (
    ActivityCategoryDBModel,
    ActivityLogDBModel,
    BusinessDBModel,
    CarbonIntensityScoreDBModel,
    IndustryBenchmarkDBModel,
)

logger = logging.getLogger(__name__)


def store_operation(func):
    """Re-raise SQLAlchemy errors from a store call as StoreFailureError."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Store operation {func.__name__} failed: {e}")
            raise StoreFailureError(func.__name__, e) from e

    return wrapper


class SQLAlchemyCarbonStore:
    """CarbonStore backed by the repositories of one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.categories = ActivityCategoryRepository(session)
        self.logs = ActivityLogRepository(session)
        self.businesses = BusinessRepository(session)
        self.benchmarks = IndustryBenchmarkRepository(session)
        self.scores = CarbonIntensityScoreRepository(session)

    @store_operation
    async def find_category_with_factor(
        self, category_id: UUID
    ) -> Optional[ActivityCategoryDBModel]:
        return await self.categories.get_with_factor(category_id)

    @store_operation
    async def find_logs_by_business_and_date_range(
        self, business_id: UUID, start: date, end: date
    ) -> list[ActivityLogDBModel]:
        return await self.logs.get_by_business_and_date_range(business_id, start, end)

    @store_operation
    async def find_benchmark_by_industry(
        self, industry: str
    ) -> Optional[IndustryBenchmarkDBModel]:
        return await self.benchmarks.get_by_industry(industry)

    @store_operation
    async def find_business_by_id(self, business_id: UUID) -> Optional[BusinessDBModel]:
        return await self.businesses.get_by_id(business_id)

    @store_operation
    async def find_log_by_id(self, log_id: UUID) -> Optional[ActivityLogDBModel]:
        return await self.logs.get_by_id(log_id)

    @store_operation
    async def create_log(self, **fields: Any) -> ActivityLogDBModel:
        return await self.logs.create(**fields)

    @store_operation
    async def delete_log(self, log_id: UUID) -> bool:
        return await self.logs.delete(log_id)

    @store_operation
    async def upsert_score(
        self, business_id: UUID, month: int, year: int, score: Decimal
    ) -> CarbonIntensityScoreDBModel:
        return await self.scores.upsert(business_id, month, year, score)

    @store_operation
    async def find_score_history(
        self, business_id: UUID, limit: int
    ) -> list[CarbonIntensityScoreDBModel]:
        return await self.scores.get_history(business_id, limit)
