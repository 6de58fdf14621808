"""
CarbonIntensityScore SQLAlchemy model.

A cache of the most recent score computation per business and month. It is
never the system of record: the score can be recomputed from logs and the
benchmark at any time.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID

from carbon_tracker.database import Base


class CarbonIntensityScoreDBModel(Base):
    """Cached carbon intensity score for one (business, month, year)."""

    __tablename__ = "carbon_intensity_scores"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    business_id = Column(
        UUID(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        comment="Scored business",
    )

    month = Column(Integer, nullable=False, comment="Month (1-12)")

    year = Column(Integer, nullable=False, comment="Year")

    score = Column(
        Numeric(5, 2),
        nullable=False,
        comment="Carbon intensity score (0-100)",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "business_id", "month", "year", name="uq_carbon_intensity_scores_period"
        ),
        {"comment": "Latest carbon intensity score per business and month"},
    )

    def __repr__(self):
        return (
            f"<CarbonIntensityScoreDBModel: {self.year}-{self.month:02d} "
            f"score={self.score}>"
        )
