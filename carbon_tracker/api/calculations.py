"""
Calculations API router.

Preview the emissions of a quantity without logging it.
"""

import logging

from fastapi import APIRouter, Depends

from carbon_tracker.core.dependencies import get_carbon_store
from carbon_tracker.database.store import SQLAlchemyCarbonStore
from carbon_tracker.pydantic_models.analytics import CalculationResult
from carbon_tracker.pydantic_models.calculation import CalculationRequest
from carbon_tracker.services.calculators.emission_calculator import EmissionCalculator

router = APIRouter(
    prefix="/api/v1/calculations",
    tags=["Calculations"],
)

logger = logging.getLogger(__name__)


@router.post("/calculate", response_model=CalculationResult)
async def calculate_emissions(
    request: CalculationRequest,
    store: SQLAlchemyCarbonStore = Depends(get_carbon_store),
):
    """
    Calculate CO2 emissions for a category and quantity. Nothing is stored.

    Example:
        ```
        POST /api/v1/calculations/calculate
        {"category_id": "...", "quantity": 100}
        ```
    """
    logger.info(f"Calculation preview for category {request.category_id}")
    return await EmissionCalculator(store).calculate(
        request.category_id, request.quantity
    )
