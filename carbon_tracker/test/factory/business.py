"""
Factories for business profiles and industry benchmarks.
"""
import uuid
from datetime import datetime
from decimal import Decimal

import factory

from carbon_tracker.database.schemas import BusinessDBModel, IndustryBenchmarkDBModel
from carbon_tracker.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_tracker.test.factory.create_async_session import async_session


class IndustryBenchmarkFactory(AsyncSQLAlchemyFactory):
    """Factory for creating IndustryBenchmark test instances."""

    class Meta:
        model = IndustryBenchmarkDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    industry = factory.Sequence(lambda n: f"Test Industry {n}")
    avg_monthly_emissions = Decimal("1000.00")
    unit = "kg CO2"
    source = "Test Data"
    created_at = factory.LazyFunction(datetime.utcnow)


class BusinessFactory(AsyncSQLAlchemyFactory):
    """
    Factory for creating Business test instances.

    The industry is not checked against benchmarks here; create the
    benchmark first when the test scores the business.
    """

    class Meta:
        model = BusinessDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    user_id = factory.LazyFunction(uuid.uuid4)
    name = factory.Sequence(lambda n: f"Test Business {n}")
    industry = "Restaurant"
    location = "Pune"
    employee_count = 25
    annual_revenue = None
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)
