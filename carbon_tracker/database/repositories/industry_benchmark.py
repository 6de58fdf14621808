"""
Repository for IndustryBenchmark database operations.
"""
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.schemas import IndustryBenchmarkDBModel


class IndustryBenchmarkRepository(BaseRepository[IndustryBenchmarkDBModel]):
    """Repository for industry benchmark operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(IndustryBenchmarkDBModel, session)

    async def get_by_industry(
        self, industry: str
    ) -> Optional[IndustryBenchmarkDBModel]:
        """
        Get the benchmark for an industry.

        Args:
            industry: Exact industry name

        Returns:
            Benchmark if found, None otherwise
        """
        stmt = select(self.model).where(self.model.industry == industry)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_all_ordered(self) -> List[IndustryBenchmarkDBModel]:
        """Get all benchmarks ordered by industry name."""
        stmt = select(self.model).order_by(self.model.industry)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert(
        self, industry: str, avg_monthly_emissions: Decimal, source: Optional[str]
    ) -> IndustryBenchmarkDBModel:
        """Create the benchmark of an industry or refresh its values."""
        benchmark = await self.get_by_industry(industry)
        if benchmark is None:
            return await self.create(
                industry=industry,
                avg_monthly_emissions=avg_monthly_emissions,
                source=source,
            )

        benchmark.avg_monthly_emissions = avg_monthly_emissions
        benchmark.source = source
        await self.session.flush()
        return benchmark
