"""
Factories for the emission category catalog.
"""
import uuid
from datetime import datetime
from decimal import Decimal

import factory

from carbon_tracker.database.schemas import (
    ActivityCategoryDBModel,
    EmissionFactorDBModel,
)
from carbon_tracker.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_tracker.test.factory.create_async_session import async_session
from carbon_tracker.utils.constants import Scope


class ActivityCategoryFactory(AsyncSQLAlchemyFactory):
    """Factory for creating ActivityCategory test instances."""

    class Meta:
        model = ActivityCategoryDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    name = factory.Sequence(lambda n: f"Test Category {n}")
    unit = "litres"
    scope = Scope.SCOPE_1
    description = factory.Sequence(lambda n: f"Test category description {n}")
    created_at = factory.LazyFunction(datetime.utcnow)


class ElectricityCategoryFactory(ActivityCategoryFactory):
    """Factory for Scope 2 grid electricity categories."""

    name = factory.Sequence(lambda n: f"Grid Electricity {n}")
    unit = "kWh"
    scope = Scope.SCOPE_2


class TravelCategoryFactory(ActivityCategoryFactory):
    """Factory for Scope 3 business travel categories."""

    name = factory.Sequence(lambda n: f"Business Travel {n}")
    unit = "km"
    scope = Scope.SCOPE_3


class EmissionFactorFactory(AsyncSQLAlchemyFactory):
    """
    Factory for creating EmissionFactor test instances.

    ``category_id`` must be passed explicitly.
    """

    class Meta:
        model = EmissionFactorDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    factor = Decimal("2.31")
    unit = "kg CO2 per litre"
    source = "Test Data"
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


async def create_category_with_factor(factor="2.31", **kwargs):
    """Create a category and its emission factor, returning the category."""
    category = await ActivityCategoryFactory(**kwargs)
    await EmissionFactorFactory(
        category_id=category.id,
        factor=Decimal(factor),
        unit=f"kg CO2 per {category.unit}",
    )
    return category
