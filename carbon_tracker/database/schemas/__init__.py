"""
SQLAlchemy database models (schemas).
"""
from carbon_tracker.database.schemas.activity_category import ActivityCategoryDBModel
from carbon_tracker.database.schemas.activity_log import ActivityLogDBModel
from carbon_tracker.database.schemas.business import BusinessDBModel
from carbon_tracker.database.schemas.carbon_intensity_score import (
    CarbonIntensityScoreDBModel,
)
from carbon_tracker.database.schemas.emission_factor import EmissionFactorDBModel
from carbon_tracker.database.schemas.industry_benchmark import IndustryBenchmarkDBModel

__all__ = [
    "ActivityCategoryDBModel",
    "ActivityLogDBModel",
    "BusinessDBModel",
    "CarbonIntensityScoreDBModel",
    "EmissionFactorDBModel",
    "IndustryBenchmarkDBModel",
]
