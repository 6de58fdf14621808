"""
Pydantic models for the emission category catalog.
"""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EmissionFactorPydModel(BaseModel):
    """Emission factor of a category."""

    model_config = ConfigDict(from_attributes=True)

    factor: Decimal = Field(..., description="kg CO2 per unit", examples=[Decimal("2.310000")])
    unit: str = Field(..., max_length=100, examples=["kg CO2 per litre"])
    source: Optional[str] = Field(None, max_length=200, examples=["IPCC 2023"])


class ActivityCategorySummary(BaseModel):
    """Category fields embedded in activity log responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    unit: str
    scope: int


class ActivityCategoryPydModel(ActivityCategorySummary):
    """Model for category response."""

    description: Optional[str] = None
    emission_factor: Optional[EmissionFactorPydModel] = None


class ScopeCategories(BaseModel):
    """Categories of one GHG scope."""

    scope: int = Field(..., ge=1, le=3)
    scope_name: str = Field(..., examples=["Direct Emissions"])
    categories: list[ActivityCategoryPydModel]


class CategoryCatalog(BaseModel):
    """Whole catalog grouped by scope, Scope 1 first."""

    total: int
    scopes: list[ScopeCategories]
