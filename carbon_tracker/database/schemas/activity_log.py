"""
ActivityLog SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from carbon_tracker.database import Base


class ActivityLogDBModel(Base):
    """
    A single logged activity.

    ``co2_emission`` and ``scope`` are copied from the calculation at
    creation time and never recomputed, so later factor changes do not
    alter history. Logs are never updated in place.
    """

    __tablename__ = "activity_logs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    business_id = Column(
        UUID(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning business",
    )

    category_id = Column(
        UUID(as_uuid=True),
        ForeignKey("activity_categories.id", ondelete="RESTRICT"),
        nullable=False,
        comment="Emission category",
    )

    category = relationship("ActivityCategoryDBModel", lazy="selectin")

    quantity = Column(
        Numeric(14, 4),
        nullable=False,
        comment="Activity quantity in the category unit",
    )

    co2_emission = Column(
        Numeric(14, 4),
        nullable=False,
        comment="CO2 emission in kg, frozen at creation time",
    )

    scope = Column(
        Integer,
        nullable=False,
        comment="GHG Protocol scope, copied from the category at creation time",
    )

    date = Column(
        Date,
        nullable=False,
        comment="Date when the activity occurred",
    )

    notes = Column(String, nullable=True, comment="Free-text note")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_activity_logs_business_date", "business_id", "date"),
        Index("ix_activity_logs_business_scope", "business_id", "scope"),
        {"comment": "Logged activities with frozen CO2 results"},
    )

    def __repr__(self):
        return (
            f"<ActivityLogDBModel: {self.quantity} -> {self.co2_emission} kg CO2 "
            f"(scope {self.scope}) on {self.date}>"
        )
