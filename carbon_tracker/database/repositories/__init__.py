"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from carbon_tracker.database.repositories.activity_category import (
    ActivityCategoryRepository,
)
from carbon_tracker.database.repositories.activity_log import ActivityLogRepository
from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.repositories.business import BusinessRepository
from carbon_tracker.database.repositories.carbon_intensity_score import (
    CarbonIntensityScoreRepository,
)
from carbon_tracker.database.repositories.industry_benchmark import (
    IndustryBenchmarkRepository,
)

__all__ = [
    "ActivityCategoryRepository",
    "ActivityLogRepository",
    "BaseRepository",
    "BusinessRepository",
    "CarbonIntensityScoreRepository",
    "IndustryBenchmarkRepository",
]
