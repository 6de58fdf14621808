"""
ActivityLog Repository.

Date-window queries for the aggregation engine plus filtered, paginated
listing for the activity log endpoints.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.schemas.activity_log import ActivityLogDBModel


class ActivityLogRepository(BaseRepository[ActivityLogDBModel]):
    """Repository for activity log operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ActivityLogDBModel, session)

    async def create(self, **data) -> ActivityLogDBModel:
        """Create a log with its category loaded."""
        log = await super().create(**data)
        await self.session.refresh(log, attribute_names=["category"])
        return log

    async def get_by_business_and_date_range(
        self,
        business_id: UUID,
        from_date: date,
        to_date: date,
    ) -> list[ActivityLogDBModel]:
        """
        Get every log of a business dated within a window.

        Args:
            business_id: Owning business
            from_date: Start date (inclusive)
            to_date: End date (inclusive)

        Returns:
            Logs ordered by date, then creation time
        """
        stmt = (
            select(ActivityLogDBModel)
            .where(
                and_(
                    ActivityLogDBModel.business_id == business_id,
                    ActivityLogDBModel.date >= from_date,
                    ActivityLogDBModel.date <= to_date,
                )
            )
            .order_by(ActivityLogDBModel.date, ActivityLogDBModel.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    def _filtered(
        self,
        stmt,
        business_id: UUID,
        scope: Optional[int] = None,
        category_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ):
        stmt = stmt.where(ActivityLogDBModel.business_id == business_id)

        # Apply filters
        if scope is not None:
            stmt = stmt.where(ActivityLogDBModel.scope == scope)
        if category_id is not None:
            stmt = stmt.where(ActivityLogDBModel.category_id == category_id)
        if start_date is not None:
            stmt = stmt.where(ActivityLogDBModel.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(ActivityLogDBModel.date <= end_date)
        return stmt

    async def list_for_business(
        self,
        business_id: UUID,
        scope: Optional[int] = None,
        category_id: Optional[UUID] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> tuple[list[ActivityLogDBModel], int]:
        """
        Get one page of a business's logs, newest first, plus the total count.

        Args:
            business_id: Owning business
            scope: Optional scope filter
            category_id: Optional category filter
            start_date: Optional start date (inclusive)
            end_date: Optional end date (inclusive)
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple of (logs, total matching count)
        """
        filters = dict(
            business_id=business_id,
            scope=scope,
            category_id=category_id,
            start_date=start_date,
            end_date=end_date,
        )

        count_stmt = self._filtered(
            select(func.count()).select_from(ActivityLogDBModel), **filters
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            self._filtered(select(ActivityLogDBModel), **filters)
            .order_by(
                ActivityLogDBModel.date.desc(), ActivityLogDBModel.created_at.desc()
            )
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def count_for_business(self, business_id: UUID) -> int:
        """Number of logs owned by a business."""
        return await self.count(filters={"business_id": business_id})
