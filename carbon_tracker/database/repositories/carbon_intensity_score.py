"""
CarbonIntensityScore Repository.

Scores are a cache keyed by (business, month, year). Writes go through the
database's native ``INSERT ... ON CONFLICT DO UPDATE`` so concurrent
recomputations of the same period resolve to the last writer.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.exceptions import ConfigurationError
from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.schemas.carbon_intensity_score import (
    CarbonIntensityScoreDBModel,
)

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CarbonIntensityScoreRepository(BaseRepository[CarbonIntensityScoreDBModel]):
    """Repository for cached carbon intensity scores."""

    def __init__(self, session: AsyncSession):
        super().__init__(CarbonIntensityScoreDBModel, session)

    def _insert(self):
        dialect = self.session.get_bind().dialect.name
        try:
            return _DIALECT_INSERTS[dialect](CarbonIntensityScoreDBModel)
        except KeyError:
            logger.error(f"Score upsert is not supported on dialect '{dialect}'")
            raise ConfigurationError(
                f"Score upsert is not supported on dialect '{dialect}'",
                dialect=dialect,
            ) from None

    async def upsert(
        self, business_id: UUID, month: int, year: int, score: Decimal
    ) -> CarbonIntensityScoreDBModel:
        """
        Insert or overwrite the score of a period.

        Args:
            business_id: Scored business
            month: Month (1-12)
            year: Year
            score: Score value (0-100)

        Returns:
            The stored score row
        """
        now = datetime.utcnow()
        insert_stmt = self._insert().values(
            business_id=business_id,
            month=month,
            year=year,
            score=score,
            created_at=now,
            updated_at=now,
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=["business_id", "month", "year"],
            set_={"score": insert_stmt.excluded.score, "updated_at": now},
        )
        await self.session.execute(stmt)
        await self.session.flush()

        # The ORM identity map may hold a stale copy of the row
        stored = await self.get_for_period(business_id, month, year)
        await self.session.refresh(stored)
        return stored

    async def get_for_period(
        self, business_id: UUID, month: int, year: int
    ) -> Optional[CarbonIntensityScoreDBModel]:
        """Get the cached score of one period."""
        stmt = select(CarbonIntensityScoreDBModel).where(
            and_(
                CarbonIntensityScoreDBModel.business_id == business_id,
                CarbonIntensityScoreDBModel.month == month,
                CarbonIntensityScoreDBModel.year == year,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_history(
        self, business_id: UUID, limit: int = 6
    ) -> list[CarbonIntensityScoreDBModel]:
        """
        Get the most recent cached scores of a business.

        Args:
            business_id: Scored business
            limit: Maximum number of periods

        Returns:
            Scores ordered newest period first
        """
        stmt = (
            select(CarbonIntensityScoreDBModel)
            .where(CarbonIntensityScoreDBModel.business_id == business_id)
            .order_by(
                CarbonIntensityScoreDBModel.year.desc(),
                CarbonIntensityScoreDBModel.month.desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
