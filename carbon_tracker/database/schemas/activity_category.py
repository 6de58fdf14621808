"""
ActivityCategory SQLAlchemy model.

Reference data: categories are seeded once and never edited, since changing
a category's scope would silently rewrite historical aggregates.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from carbon_tracker.database import Base


class ActivityCategoryDBModel(Base):
    """
    Emission category an activity is logged against.

    Each category belongs to exactly one GHG Protocol scope and has exactly
    one emission factor.
    """

    __tablename__ = "activity_categories"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(
        String(200),
        nullable=False,
        unique=True,
        comment="Category name (e.g., 'Diesel', 'Electricity')",
    )

    unit = Column(
        String(50),
        nullable=False,
        comment="Unit the activity quantity is measured in (e.g., litres, kWh, km)",
    )

    scope = Column(
        Integer,
        nullable=False,
        comment="GHG Protocol scope (1, 2, or 3)",
    )

    description = Column(
        String,
        nullable=True,
        comment="What activities belong to this category",
    )

    emission_factor = relationship(
        "EmissionFactorDBModel",
        back_populates="category",
        uselist=False,
        lazy="selectin",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_activity_categories_scope", "scope"),
        {"comment": "Emission categories grouped by GHG Protocol scope"},
    )

    def __repr__(self):
        return f"<ActivityCategoryDBModel: [Scope {self.scope}] {self.name}>"
