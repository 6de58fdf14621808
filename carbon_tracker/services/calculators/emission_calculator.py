"""
Emission calculator service.

Applies a category's emission factor to an activity quantity.
"""

import logging
from decimal import Decimal
from uuid import UUID

from carbon_tracker.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    NotFoundError,
)
from carbon_tracker.pydantic_models.analytics import (
    CalculationBreakdown,
    CalculationResult,
)
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.services.ports import CarbonStore
from carbon_tracker.utils.constants import CO2_UNIT, MAX_STORED_AMOUNT

logger = logging.getLogger(__name__)


def validate_quantity(quantity: str | int | float | Decimal) -> Decimal:
    """
    Convert a quantity to Decimal and check it is finite and positive.

    Raises:
        InvalidInputError: If the quantity is non-numeric, non-finite, <= 0
            or too large to store
    """
    value = Precision.normalize_number(quantity)
    if not value.is_finite() or value <= 0:
        raise InvalidInputError(
            "Quantity must be a positive number", quantity=quantity
        )
    if value >= MAX_STORED_AMOUNT:
        raise InvalidInputError(
            f"Quantity must be less than {MAX_STORED_AMOUNT}", quantity=quantity
        )
    return value


class EmissionCalculator:
    """
    Service for calculating CO2 emissions of a single activity.

    Pure with respect to the catalog: it reads a category and its factor and
    writes nothing.
    """

    def __init__(self, store: CarbonStore):
        """Initialize calculator with a persistence port."""
        self.store = store

    async def calculate(
        self, category_id: UUID, quantity: str | int | float | Decimal
    ) -> CalculationResult:
        """
        Calculate CO2 emissions for a quantity of a category.

        Args:
            category_id: Activity category UUID
            quantity: Activity quantity in the category unit

        Returns:
            CalculationResult with the rounded emission and its breakdown

        Raises:
            InvalidInputError: If the quantity is not a positive number or the
                emission is too large to store
            NotFoundError: If the category does not exist
            ConfigurationError: If the category has no emission factor

        Formula:
            CO2 (kg) = quantity * factor, rounded half-up to 4 places

        Example:
            >>> result = await calculator.calculate(petrol_id, 100)
            >>> result.co2_emission
            Decimal('231.0000')
        """
        value = validate_quantity(quantity)

        category = await self.store.find_category_with_factor(category_id)
        if category is None:
            raise NotFoundError(
                f"Category not found: {category_id}", category_id=category_id
            )

        emission_factor = category.emission_factor
        if emission_factor is None:
            logger.error(f"Category {category.name} ({category_id}) has no emission factor")
            raise ConfigurationError(
                f"No emission factor found for category: {category.name}",
                category_id=category_id,
            )

        factor = Precision.normalize_number(emission_factor.factor)
        raw_emission = value * factor
        if raw_emission >= MAX_STORED_AMOUNT:
            raise InvalidInputError(
                f"Emission of {raw_emission} kg CO2 exceeds the storable maximum",
                quantity=value,
                category_id=category_id,
            )
        co2_emission = Precision.mass(raw_emission)

        logger.debug(
            f"Calculated {co2_emission} kg CO2 for {value} {category.unit} of {category.name}"
        )

        return CalculationResult(
            category_id=category.id,
            category_name=category.name,
            scope=category.scope,
            quantity=value,
            unit=category.unit,
            factor=factor,
            co2_emission=co2_emission,
            breakdown=CalculationBreakdown(
                formula=(
                    f"{value} {category.unit} × {factor.normalize():f} "
                    f"{CO2_UNIT}/{category.unit}"
                ),
                result=f"{co2_emission} {CO2_UNIT}",
                source=emission_factor.source,
            ),
        )
