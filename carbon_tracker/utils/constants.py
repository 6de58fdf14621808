"""
Application constants.
"""
from decimal import Decimal
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class Scope:
    """GHG Protocol Scope constants."""
    SCOPE_1 = 1
    SCOPE_2 = 2
    SCOPE_3 = 3

    ALL = (SCOPE_1, SCOPE_2, SCOPE_3)


SCOPE_NAMES = {
    Scope.SCOPE_1: "Direct Emissions",
    Scope.SCOPE_2: "Indirect Energy",
    Scope.SCOPE_3: "Value Chain",
}


class ScopeEnum(int, Enum):
    """GHG Protocol Scope enum for API parameters."""
    SCOPE_1 = 1
    SCOPE_2 = 2
    SCOPE_3 = 3


class TrendDirection:
    """Month-over-month direction flags."""
    INCREASED = "increased"
    DECREASED = "decreased"
    NO_CHANGE = "no change"
    NO_PREVIOUS_DATA = "no previous data"


class PerformanceLabel:
    """Qualitative bands for the carbon intensity score."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    CRITICAL = "Critical"


# Lower bound (inclusive) of each band, highest first
PERFORMANCE_BANDS = (
    (Decimal("75"), PerformanceLabel.EXCELLENT),
    (Decimal("50"), PerformanceLabel.GOOD),
    (Decimal("25"), PerformanceLabel.NEEDS_IMPROVEMENT),
)

# Fixed-precision quanta
MASS_QUANTUM = Decimal("0.0001")
PERCENT_QUANTUM = Decimal("0.01")
# Quantities and kg CO2 amounts are stored as Numeric(14, 4)
MAX_STORED_AMOUNT = Decimal("10000000000")

MAX_SCORE = Decimal("100")
MIN_SCORE = Decimal("0")
# Emitting exactly at benchmark costs this many points
BENCHMARK_PENALTY = Decimal("50")

CO2_UNIT = "kg CO₂"

DEFAULT_TREND_MONTHS = 6
MAX_TREND_MONTHS = 12
SCORE_HISTORY_LIMIT = 6
