"""
Pydantic models for Business profiles and industry benchmarks.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BusinessBase(BaseModel):
    """Base business model."""

    name: str = Field(..., min_length=1, max_length=200, description="Business name")
    industry: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Industry, must match a benchmark",
        examples=["Restaurant"],
    )
    location: Optional[str] = Field(None, max_length=200, examples=["Pune"])
    employee_count: Optional[int] = Field(
        None, ge=1, description="Number of employees", examples=[25]
    )
    annual_revenue: Optional[Decimal] = Field(
        None, ge=0, max_digits=16, decimal_places=2, description="Annual revenue"
    )


class BusinessCreate(BusinessBase):
    """Model for creating a business profile."""

    user_id: UUID = Field(..., description="Owning user account")


class BusinessUpdate(BaseModel):
    """
    Model for updating a business profile.

    Only the fields present in the request are applied; each is validated
    with the same rules as on creation.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    industry: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    employee_count: Optional[int] = Field(None, ge=1)
    annual_revenue: Optional[Decimal] = Field(
        None, ge=0, max_digits=16, decimal_places=2
    )


class BusinessPydModel(BusinessBase):
    """Model for business response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class IndustryBenchmarkPydModel(BaseModel):
    """Model for industry benchmark response."""

    model_config = ConfigDict(from_attributes=True)

    industry: str = Field(..., examples=["Restaurant"])
    avg_monthly_emissions: Decimal = Field(..., examples=[Decimal("2850.00")])
    unit: str = Field(..., examples=["kg CO2"])
    source: Optional[str] = None


class BusinessProfile(BaseModel):
    """Business with its industry benchmark."""

    business: BusinessPydModel
    benchmark: IndustryBenchmarkPydModel
    activity_log_count: Optional[int] = None
    message: Optional[str] = None
