"""
Pydantic models for calculation results and analytics reports.

Mass fields are kg CO2 with four decimal places, percentages and scores
have two. Decimals serialise as strings so the precision survives JSON.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from carbon_tracker.utils.constants import CO2_UNIT


class CalculationBreakdown(BaseModel):
    """Human-readable explanation of a calculation."""

    formula: str = Field(
        ...,
        description="Applied formula",
        examples=["100 litres × 2.31 kg CO₂/litres"],
    )
    result: str = Field(..., examples=["231.0000 kg CO₂"])
    source: Optional[str] = Field(
        None,
        description="Emission factor provenance",
        examples=["IPCC 2023"],
    )


class CalculationResult(BaseModel):
    """Result of applying an emission factor to a quantity."""

    category_id: UUID
    category_name: str = Field(..., examples=["Petrol"])
    scope: int = Field(..., ge=1, le=3, examples=[1])
    quantity: Decimal = Field(..., examples=[Decimal("100")])
    unit: str = Field(..., examples=["litres"])
    factor: Decimal = Field(
        ...,
        description="kg CO2 per unit",
        examples=[Decimal("2.310000")],
    )
    co2_emission: Decimal = Field(
        ...,
        description="CO2 emission in kg, four decimal places",
        examples=[Decimal("231.0000")],
    )
    breakdown: CalculationBreakdown


class ScopeTotals(BaseModel):
    """Emission totals per GHG scope. Empty scopes report zero."""

    scope1: Decimal = Field(..., examples=[Decimal("50.0000")])
    scope2: Decimal = Field(..., examples=[Decimal("0.0000")])
    scope3: Decimal = Field(..., examples=[Decimal("150.0000")])


class CategoryTotal(BaseModel):
    """Emission total of one category within a period."""

    total: Decimal = Field(..., examples=[Decimal("150.0000")])
    count: int = Field(..., examples=[2])
    percentage: Decimal = Field(
        ...,
        description="Share of the period total",
        examples=[Decimal("75.00")],
    )


class MonthlyEmissions(BaseModel):
    """Aggregate of one calendar month."""

    month: int = Field(..., ge=1, le=12, examples=[3])
    year: int = Field(..., examples=[2026])
    total_co2: Decimal = Field(..., examples=[Decimal("200.0000")])
    by_scope: ScopeTotals
    by_category: dict[str, CategoryTotal] = Field(default_factory=dict)
    log_count: int = Field(..., examples=[2])
    unit: str = CO2_UNIT


class TrendPoint(MonthlyEmissions):
    """One month of a trend with its change against the previous month."""

    label: str = Field(..., examples=["March 2026"])
    change_from_previous_month: Optional[Decimal] = Field(
        None,
        description="Percentage change, None for the first month or when the previous month is zero",
        examples=[Decimal("50.00")],
    )
    direction: Optional[str] = Field(
        None,
        examples=["increased"],
    )


class TrendSummary(BaseModel):
    """Overall movement across a trend window."""

    months: int = Field(..., examples=[6])
    overall_change: Optional[Decimal] = Field(None, examples=[Decimal("-12.50")])
    overall_direction: str = Field(..., examples=["Emissions decreased"])
    total_co2: Decimal = Field(..., examples=[Decimal("1200.0000")])
    unit: str = CO2_UNIT


class TrendReport(BaseModel):
    summary: TrendSummary
    trend: list[TrendPoint]


class CategoryBreakdownItem(BaseModel):
    """A category row of the breakdown report."""

    category: str = Field(..., examples=["Diesel"])
    total: Decimal
    count: int
    percentage: Decimal


class CategoryBreakdown(BaseModel):
    """Categories of a month sorted by emissions, largest first."""

    month: int
    year: int
    total_co2: Decimal
    categories: list[CategoryBreakdownItem]
    insight: str = Field(
        ...,
        examples=["Diesel is your biggest emission source at 75.00% of total emissions"],
    )
    unit: str = CO2_UNIT


class IntensityScore(BaseModel):
    """Carbon intensity score of a month relative to the industry benchmark."""

    month: int
    year: int
    industry: str = Field(..., examples=["Restaurant"])
    score: Decimal = Field(..., ge=0, le=100, examples=[Decimal("90.00")])
    performance_label: str = Field(..., examples=["Excellent"])
    total_co2: Decimal = Field(..., examples=[Decimal("200.0000")])
    benchmark_co2: Decimal = Field(..., examples=[Decimal("1000.00")])
    percentage_vs_benchmark: Decimal = Field(..., examples=[Decimal("20.00")])
    difference: Decimal = Field(..., examples=[Decimal("-800.0000")])
    interpretation: str
    unit: str = CO2_UNIT


class ScoreHistoryEntry(BaseModel):
    """A cached score of a past computation."""

    model_config = ConfigDict(from_attributes=True)

    month: int
    year: int
    score: Decimal
    updated_at: datetime


class BenchmarkComparison(BaseModel):
    """Current score plus the most recent cached scores, newest first."""

    current: IntensityScore
    history: list[ScoreHistoryEntry]
