"""
Business profile service.

One profile per user account; the industry of a profile must have a
benchmark so it can always be scored.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.exceptions import (
    ConflictError,
    InvalidInputError,
    MissingBenchmarkError,
    NotFoundError,
)
from carbon_tracker.database.repositories import (
    ActivityLogRepository,
    BusinessRepository,
    IndustryBenchmarkRepository,
)
from carbon_tracker.database.schemas import BusinessDBModel, IndustryBenchmarkDBModel
from carbon_tracker.pydantic_models.business import BusinessCreate, BusinessUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "industry")


class BusinessService:
    """Create, read and partially update business profiles."""

    def __init__(self, session: AsyncSession):
        self.businesses = BusinessRepository(session)
        self.benchmarks = IndustryBenchmarkRepository(session)
        self.logs = ActivityLogRepository(session)

    async def _valid_industry(self, industry: str) -> IndustryBenchmarkDBModel:
        benchmark = await self.benchmarks.get_by_industry(industry)
        if benchmark is None:
            raise InvalidInputError(
                "Invalid industry. Use GET /api/v1/businesses/industries to see valid options",
                industry=industry,
            )
        return benchmark

    async def get_business(self, business_id: UUID) -> BusinessDBModel:
        """
        Raises:
            NotFoundError: If the business does not exist
        """
        business = await self.businesses.get_by_id(business_id)
        if business is None:
            raise NotFoundError("Business profile not found", business_id=business_id)
        return business

    async def get_benchmark(self, business: BusinessDBModel) -> IndustryBenchmarkDBModel:
        """
        Benchmark of the business's industry.

        Raises:
            MissingBenchmarkError: If the industry lost its benchmark
        """
        benchmark = await self.benchmarks.get_by_industry(business.industry)
        if benchmark is None:
            logger.error(f"No benchmark for industry '{business.industry}'")
            raise MissingBenchmarkError(
                f"No benchmark found for industry: {business.industry}",
                industry=business.industry,
                business_id=business.id,
            )
        return benchmark

    async def create_business(
        self, data: BusinessCreate
    ) -> tuple[BusinessDBModel, IndustryBenchmarkDBModel]:
        """
        Create the profile of a user account.

        Raises:
            ConflictError: If the user already has a profile
            InvalidInputError: If the industry has no benchmark
        """
        if await self.businesses.get_by_user_id(data.user_id) is not None:
            raise ConflictError(
                "Business profile already exists", user_id=data.user_id
            )

        benchmark = await self._valid_industry(data.industry)
        business = await self.businesses.create(**data.model_dump())
        logger.info(f"Created business {business.id} ({business.industry})")
        return business, benchmark

    async def get_profile(
        self, business_id: UUID
    ) -> tuple[BusinessDBModel, IndustryBenchmarkDBModel, int]:
        """Profile, its benchmark and its number of activity logs."""
        business = await self.get_business(business_id)
        benchmark = await self.get_benchmark(business)
        log_count = await self.logs.count_for_business(business_id)
        return business, benchmark, log_count

    async def update_business(
        self, business_id: UUID, data: BusinessUpdate
    ) -> BusinessDBModel:
        """
        Apply the fields present in ``data``.

        Raises:
            NotFoundError: If the business does not exist
            InvalidInputError: If a required field is cleared or the new
                industry has no benchmark
        """
        business = await self.get_business(business_id)
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)

        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise InvalidInputError(f"{field} cannot be empty", field=field)

        if "industry" in changes and changes["industry"] != business.industry:
            await self._valid_industry(changes["industry"])

        if not changes:
            return business

        updated = await self.businesses.update(business_id, **changes)
        logger.info(f"Updated business {business_id}: {sorted(changes)}")
        return updated
