"""
EmissionFactor SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from carbon_tracker.database import Base


class EmissionFactorDBModel(Base):
    """
    CO2 emission factor for an activity category.

    One-to-one with ActivityCategoryDBModel. Factors are treated as the
    currently-in-effect constant; there is no versioning.
    """

    __tablename__ = "emission_factors"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    category_id = Column(
        UUID(as_uuid=True),
        ForeignKey("activity_categories.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Category this factor applies to",
    )

    category = relationship("ActivityCategoryDBModel", back_populates="emission_factor")

    factor = Column(
        Numeric(10, 6),
        nullable=False,
        comment="Emission factor value (kg CO2 per category unit)",
    )

    unit = Column(
        String(100),
        nullable=False,
        comment="Factor unit (e.g., 'kg CO2 per litre')",
    )

    source = Column(
        String(200),
        nullable=True,
        comment="Source of the emission factor (e.g., 'IPCC 2023', 'EPA 2023')",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = ({"comment": "Emission factor per activity category"},)

    def __repr__(self):
        return f"<EmissionFactorDBModel: {self.factor} {self.unit}>"
