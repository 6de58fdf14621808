"""
Business SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID

from carbon_tracker.database import Base


class BusinessDBModel(Base):
    """
    Business profile.

    A user account owns at most one profile. The industry must name an
    existing IndustryBenchmarkDBModel row; this is checked by the API since
    benchmarks are keyed by name rather than referenced by foreign key.
    """

    __tablename__ = "businesses"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    user_id = Column(
        UUID(as_uuid=True),
        nullable=False,
        unique=True,
        comment="Owning user account (issued by the auth layer)",
    )

    name = Column(String(200), nullable=False, comment="Business name")

    industry = Column(
        String(100),
        nullable=False,
        index=True,
        comment="Industry name, must exist in industry_benchmarks",
    )

    location = Column(String(200), nullable=True, comment="City or region")

    employee_count = Column(
        Integer, nullable=True, comment="Number of employees"
    )

    annual_revenue = Column(
        Numeric(16, 2), nullable=True, comment="Annual revenue"
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = ({"comment": "Business profiles, one per user account"},)

    def __repr__(self):
        return f"<BusinessDBModel: {self.name} ({self.industry})>"
