"""
Pydantic models for calculation previews.
"""
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from carbon_tracker.utils.constants import MAX_STORED_AMOUNT


class CalculationRequest(BaseModel):
    """Request model for previewing the emissions of a quantity."""

    category_id: UUID = Field(..., description="Emission category")
    quantity: Decimal = Field(
        ...,
        gt=0,
        lt=MAX_STORED_AMOUNT,
        description="Quantity in the category unit",
        examples=[Decimal("100")],
    )
