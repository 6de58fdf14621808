"""
Fixed-precision helpers for emissions arithmetic.

All masses are kg CO2 with four decimal places, all percentages and scores
carry two. Rounding is half-up so stored values match what a person would
compute by hand.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.utils.constants import MASS_QUANTUM, PERCENT_QUANTUM


class Precision:
    """Decimal normalisation and rounding used across the engine."""

    ZERO = Decimal("0")
    HUNDRED = Decimal("100")

    @staticmethod
    def normalize_number(value: str | int | float | Decimal) -> Decimal:
        """
        Normalize a number value to Decimal.

        Handles string inputs with commas, floats, and existing Decimals.
        Floats go through ``str`` so 2.31 stays 2.31.

        Raises:
            InvalidInputError: If the value is not numeric

        Example:
            >>> Precision.normalize_number("1,234.56")
            Decimal('1234.56')
        """
        if isinstance(value, Decimal):
            return value

        if isinstance(value, bool):
            raise InvalidInputError("Value must be numeric", value=value)

        if isinstance(value, str):
            value = value.replace(",", "")

        try:
            return Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidInputError("Value must be numeric", value=value) from None

    @staticmethod
    def mass(value: Decimal) -> Decimal:
        """Round a kg CO2 amount to four decimal places."""
        return value.quantize(MASS_QUANTUM, rounding=ROUND_HALF_UP)

    @staticmethod
    def percent(value: Decimal) -> Decimal:
        """Round a percentage or score to two decimal places."""
        return value.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)

    @classmethod
    def share(cls, part: Decimal, whole: Decimal) -> Decimal:
        """
        ``part`` as a percentage of ``whole``, two decimal places.

        Zero when ``whole`` is zero.
        """
        if whole == 0:
            return cls.percent(cls.ZERO)
        return cls.percent(part / whole * cls.HUNDRED)
