"""
Activity Logs API router.

Log activities of a business, list them with filters and delete them.
Logs cannot be edited; delete and log again instead.
"""

import logging
from datetime import date as DateType
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.dependencies import get_carbon_store, get_db_session
from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.database.repositories import ActivityLogRepository
from carbon_tracker.database.store import SQLAlchemyCarbonStore
from carbon_tracker.pydantic_models.activity_log import (
    ActivityLogCreate,
    ActivityLogCreated,
    ActivityLogPage,
    ActivityLogPydModel,
)
from carbon_tracker.services.activity_logs import ActivityLogService
from carbon_tracker.services.businesses import BusinessService
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.utils.constants import ScopeEnum

router = APIRouter(
    prefix="/api/v1/businesses/{business_id}/logs",
    tags=["Activity Logs"],
)

logger = logging.getLogger(__name__)


@router.post(
    "", response_model=ActivityLogCreated, status_code=status.HTTP_201_CREATED
)
async def create_log(
    business_id: UUID,
    data: ActivityLogCreate,
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """
    Log an activity and calculate its emissions.

    The CO2 amount and scope are frozen on the log.

    Example:
        ```
        POST /api/v1/businesses/{business_id}/logs
        {"category_id": "...", "quantity": 100, "date": "2026-03-14"}
        ```
    """
    log, calculation = await ActivityLogService(store).create_log(
        business_id=business_id,
        category_id=data.category_id,
        quantity=data.quantity,
        date=data.date,
        notes=data.notes,
    )
    return ActivityLogCreated(
        log=ActivityLogPydModel.model_validate(log), calculation=calculation
    )


@router.get("", response_model=ActivityLogPage)
async def list_logs(
    business_id: UUID,
    scope: ScopeEnum | None = Query(None, description="Filter by GHG Protocol scope"),
    category_id: UUID | None = Query(None, description="Filter by category"),
    start_date: Optional[DateType] = Query(None, description="From date (inclusive)"),
    end_date: Optional[DateType] = Query(None, description="To date (inclusive)"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    session: AsyncSession = Depends(get_db_session),
):
    """List a business's logs, newest first."""
    if start_date and end_date and start_date > end_date:
        raise InvalidInputError(
            "start_date must not be after end_date",
            start_date=start_date,
            end_date=end_date,
        )

    await BusinessService(session).get_business(business_id)

    repo = ActivityLogRepository(session)
    logs, total = await repo.list_for_business(
        business_id,
        scope=int(scope) if scope is not None else None,
        category_id=category_id,
        start_date=start_date,
        end_date=end_date,
        skip=skip,
        limit=limit,
    )

    shown = sum(
        (Precision.normalize_number(log.co2_emission) for log in logs), Decimal("0")
    )
    return ActivityLogPage(
        logs=[ActivityLogPydModel.model_validate(log) for log in logs],
        total=total,
        skip=skip,
        limit=limit,
        total_co2_shown=Precision.mass(shown),
    )


@router.get("/{log_id}", response_model=ActivityLogPydModel)
async def get_log(
    business_id: UUID,
    log_id: UUID,
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """Get one log of a business."""
    return await ActivityLogService(store).get_log(business_id, log_id)


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(
    business_id: UUID,
    log_id: UUID,
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """Delete a log. Returns 403 if it belongs to another business."""
    await ActivityLogService(store).delete_log(business_id, log_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
