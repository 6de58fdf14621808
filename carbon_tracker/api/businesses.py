"""
Business Profiles API router.

Create, read and partially update business profiles; list the industries
a profile can belong to.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.dependencies import get_db_session
from carbon_tracker.database.repositories import IndustryBenchmarkRepository
from carbon_tracker.pydantic_models.business import (
    BusinessCreate,
    BusinessProfile,
    BusinessPydModel,
    BusinessUpdate,
    IndustryBenchmarkPydModel,
)
from carbon_tracker.services.businesses import BusinessService

router = APIRouter(
    prefix="/api/v1/businesses",
    tags=["Businesses"],
)

logger = logging.getLogger(__name__)


@router.get("/industries", response_model=list[IndustryBenchmarkPydModel])
async def list_industries(session: AsyncSession = Depends(get_db_session)):
    """List the industries with a benchmark, i.e. the valid profile industries."""
    repo = IndustryBenchmarkRepository(session)
    return await repo.get_all_ordered()


@router.post(
    "", response_model=BusinessProfile, status_code=status.HTTP_201_CREATED
)
async def create_business(
    data: BusinessCreate,
    session: AsyncSession = Depends(get_db_session),
):
    """
    Create the business profile of a user account.

    Returns 409 if the user already has a profile and 400 if the industry
    has no benchmark.
    """
    business, benchmark = await BusinessService(session).create_business(data)
    return BusinessProfile(
        business=BusinessPydModel.model_validate(business),
        benchmark=IndustryBenchmarkPydModel.model_validate(benchmark),
        message=(
            f"Your industry average is {benchmark.avg_monthly_emissions} "
            f"kg CO₂/month"
        ),
    )


@router.get("/{business_id}", response_model=BusinessProfile)
async def get_business(
    business_id: UUID,
    session: AsyncSession = Depends(get_db_session),
):
    """Get a business profile with its benchmark and activity log count."""
    business, benchmark, log_count = await BusinessService(session).get_profile(
        business_id
    )
    return BusinessProfile(
        business=BusinessPydModel.model_validate(business),
        benchmark=IndustryBenchmarkPydModel.model_validate(benchmark),
        activity_log_count=log_count,
    )


@router.patch("/{business_id}", response_model=BusinessPydModel)
async def update_business(
    business_id: UUID,
    data: BusinessUpdate,
    session: AsyncSession = Depends(get_db_session),
):
    """
    Partially update a business profile.

    Only the fields sent in the body are changed.
    """
    return await BusinessService(session).update_business(business_id, data)
