"""
Pydantic models for ActivityLog.
"""

from datetime import date as DateType
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from carbon_tracker.pydantic_models.activity_category import ActivityCategorySummary
from carbon_tracker.pydantic_models.analytics import CalculationResult
from carbon_tracker.utils.constants import CO2_UNIT, MAX_STORED_AMOUNT


class ActivityLogCreate(BaseModel):
    """Model for logging an activity."""

    category_id: UUID = Field(..., description="Emission category")
    quantity: Decimal = Field(
        ...,
        gt=0,
        lt=MAX_STORED_AMOUNT,
        description="Quantity in the category unit",
        examples=[Decimal("100")],
    )
    date: DateType = Field(
        ...,
        description="Date when the activity occurred",
        examples=["2026-03-14"],
    )
    notes: Optional[str] = Field(None, max_length=500)


class ActivityLogPydModel(BaseModel):
    """Model for activity log response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    business_id: UUID
    category_id: UUID
    category: ActivityCategorySummary
    quantity: Decimal
    co2_emission: Decimal = Field(..., description="kg CO2, frozen at creation")
    scope: int
    date: DateType
    notes: Optional[str] = None
    created_at: datetime


class ActivityLogCreated(BaseModel):
    """A stored log with the calculation that produced it."""

    log: ActivityLogPydModel
    calculation: CalculationResult


class ActivityLogPage(BaseModel):
    """One page of logs plus the CO2 total of the logs on the page."""

    logs: list[ActivityLogPydModel]
    total: int
    skip: int
    limit: int
    total_co2_shown: Decimal
    unit: str = CO2_UNIT
