"""
Activity log service.

Write path of the engine: validates an activity, calculates its emissions
and stores the log with the result frozen. Logs are never updated; an edit
is a delete followed by a new log.
"""

import logging
from datetime import date as DateType
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from carbon_tracker.core.exceptions import ForbiddenError, NotFoundError
from carbon_tracker.pydantic_models.analytics import CalculationResult
from carbon_tracker.services.calculators.emission_calculator import (
    EmissionCalculator,
    validate_quantity,
)
from carbon_tracker.services.ports import CarbonStore

logger = logging.getLogger(__name__)


class ActivityLogService:
    """Create, read and delete the activity logs of a business."""

    def __init__(self, store: CarbonStore):
        self.store = store
        self.calculator = EmissionCalculator(store)

    async def _require_business(self, business_id: UUID) -> Any:
        business = await self.store.find_business_by_id(business_id)
        if business is None:
            raise NotFoundError(
                "Business profile not found. Please create one first.",
                business_id=business_id,
            )
        return business

    async def create_log(
        self,
        business_id: UUID,
        category_id: UUID,
        quantity: str | int | float | Decimal,
        date: DateType,
        notes: Optional[str] = None,
    ) -> tuple[Any, CalculationResult]:
        """
        Log an activity for a business.

        Input is validated before anything is calculated or stored.

        Returns:
            Tuple of (stored log, calculation result)

        Raises:
            NotFoundError: If the business or category does not exist
            InvalidInputError: If the quantity is not a positive number
            ConfigurationError: If the category has no emission factor
        """
        await self._require_business(business_id)
        value = validate_quantity(quantity)

        calculation = await self.calculator.calculate(category_id, value)

        log = await self.store.create_log(
            business_id=business_id,
            category_id=category_id,
            quantity=value,
            co2_emission=calculation.co2_emission,
            scope=calculation.scope,
            date=date,
            notes=notes or None,
        )
        logger.info(
            f"Logged {value} {calculation.unit} of {calculation.category_name} "
            f"for business {business_id}: {calculation.co2_emission} kg CO2"
        )
        return log, calculation

    async def get_log(self, business_id: UUID, log_id: UUID) -> Any:
        """
        Get a log owned by a business.

        Raises:
            NotFoundError: If the log does not exist
            ForbiddenError: If the log belongs to another business
        """
        log = await self.store.find_log_by_id(log_id)
        if log is None:
            raise NotFoundError("Activity log not found", log_id=log_id)
        if log.business_id != business_id:
            raise ForbiddenError(
                "Activity log belongs to another business",
                log_id=log_id,
                business_id=business_id,
            )
        return log

    async def delete_log(self, business_id: UUID, log_id: UUID) -> None:
        """
        Delete a log owned by a business.

        Raises:
            NotFoundError: If the log does not exist
            ForbiddenError: If the log belongs to another business
        """
        await self.get_log(business_id, log_id)
        await self.store.delete_log(log_id)
        logger.info(f"Deleted activity log {log_id} of business {business_id}")
