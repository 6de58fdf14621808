"""
Database seeding service for loading the emission catalog from CSV files.

Seeds activity categories with their emission factors and the industry
benchmarks. Seeding is idempotent: existing rows are matched by name and
their factors or averages refreshed.

Usage:
    from carbon_tracker.services.seed_database import DatabaseSeeder

    async with DatabaseSeeder() as seeder:
        await seeder.seed_all()
"""

import csv
import logging
from pathlib import Path
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.exceptions import InvalidInputError
from carbon_tracker.database.repositories import (
    ActivityCategoryRepository,
    IndustryBenchmarkRepository,
)
from carbon_tracker.database.schemas import (
    ActivityCategoryDBModel,
    EmissionFactorDBModel,
    IndustryBenchmarkDBModel,
)
from carbon_tracker.database.session_manager.db_session import Database
from carbon_tracker.services.calculators.precision import Precision
from carbon_tracker.utils.constants import Scope

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

CATEGORIES_FILE = "activity_categories.csv"
BENCHMARKS_FILE = "industry_benchmarks.csv"


class DatabaseSeeder:
    """Service for seeding the catalog and benchmarks from CSV files."""

    def __init__(
        self,
        session: AsyncSession | None = None,
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ):
        """
        Initialize the database seeder.

        Args:
            session: Optional async database session. If not provided, will create one.
            data_dir: Directory containing CSV files (default: carbon_tracker/data)
        """
        self._session = session
        self._external_session = session is not None
        self.data_dir = Path(data_dir)

        if not self.data_dir.exists():
            raise ValueError(f"Data directory not found: {self.data_dir}")

    async def __aenter__(self):
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    async def seed_all(self, clear_existing: bool = False) -> dict[str, Any]:
        """
        Seed categories, emission factors and benchmarks.

        Args:
            clear_existing: If True, clear the catalog before seeding. Fails
                when activity logs still reference a category.

        Returns:
            Dictionary with seeding statistics
        """
        logger.info("Starting database seeding")

        stats = {"categories": 0, "benchmarks": 0, "errors": []}

        if clear_existing:
            await self._clear_existing_data()

        categories, errors = await self.seed_categories()
        stats["categories"] = categories
        stats["errors"].extend(errors)

        benchmarks, errors = await self.seed_benchmarks()
        stats["benchmarks"] = benchmarks
        stats["errors"].extend(errors)

        await self.session.flush()
        logger.info(
            f"Database seeding completed: {stats['categories']} categories, "
            f"{stats['benchmarks']} benchmarks, {len(stats['errors'])} errors"
        )
        return stats

    async def _clear_existing_data(self):
        logger.info("Clearing existing catalog data")
        await self.session.execute(delete(EmissionFactorDBModel))
        await self.session.execute(delete(ActivityCategoryDBModel))
        await self.session.execute(delete(IndustryBenchmarkDBModel))
        await self.session.flush()

    def _read_rows(self, file_name: str) -> list[dict[str, str]]:
        csv_file = self.data_dir / file_name
        if not csv_file.exists():
            logger.warning(f"File not found: {csv_file}")
            return []

        logger.info(f"Loading {csv_file}")
        with open(csv_file, "r", encoding="utf-8") as f:
            return list(csv.DictReader(f))

    async def seed_categories(self) -> tuple[int, list[str]]:
        """
        Load categories and emission factors from activity_categories.csv.

        Returns:
            Tuple of (categories seeded, row errors)
        """
        repo = ActivityCategoryRepository(self.session)
        count = 0
        errors = []

        for row in self._read_rows(CATEGORIES_FILE):
            try:
                scope = int(row["Scope"])
                if scope not in Scope.ALL:
                    raise ValueError(f"invalid scope {scope}")

                category = await repo.upsert_with_factor(
                    name=row["Name"].strip(),
                    unit=row["Unit"].strip(),
                    scope=scope,
                    description=row.get("Description") or None,
                    factor=Precision.normalize_number(row["Factor"]),
                    factor_unit=row["Factor unit"].strip(),
                    source=row.get("Source") or None,
                )
                logger.debug(
                    f"[Scope {scope}] {category.name}: {row['Factor']} {row['Factor unit']}"
                )
                count += 1

            except (KeyError, ValueError, InvalidInputError) as e:
                logger.warning(f"Failed to seed category from row {row}: {e}")
                errors.append(f"{row.get('Name', '?')}: {e}")

        logger.info(f"Seeded {count} categories with emission factors")
        return count, errors

    async def seed_benchmarks(self) -> tuple[int, list[str]]:
        """
        Load industry benchmarks from industry_benchmarks.csv.

        Returns:
            Tuple of (benchmarks seeded, row errors)
        """
        repo = IndustryBenchmarkRepository(self.session)
        count = 0
        errors = []

        for row in self._read_rows(BENCHMARKS_FILE):
            try:
                average = Precision.normalize_number(row["Average monthly emissions"])
                if average <= 0:
                    raise ValueError(f"average must be positive, got {average}")

                await repo.upsert(
                    industry=row["Industry"].strip(),
                    avg_monthly_emissions=average,
                    source=row.get("Source") or None,
                )
                count += 1

            except (KeyError, ValueError, InvalidInputError) as e:
                logger.warning(f"Failed to seed benchmark from row {row}: {e}")
                errors.append(f"{row.get('Industry', '?')}: {e}")

        logger.info(f"Seeded {count} industry benchmarks")
        return count, errors
