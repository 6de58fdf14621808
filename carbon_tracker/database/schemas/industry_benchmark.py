"""
IndustryBenchmark SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Numeric, String
from sqlalchemy.dialects.postgresql import UUID

from carbon_tracker.database import Base


class IndustryBenchmarkDBModel(Base):
    """
    Average monthly emissions for an industry.

    Used only as the comparison baseline for carbon intensity scoring.
    """

    __tablename__ = "industry_benchmarks"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    industry = Column(
        String(100),
        nullable=False,
        unique=True,
        comment="Industry name (e.g., 'Restaurant', 'Logistics')",
    )

    avg_monthly_emissions = Column(
        Numeric(12, 2),
        nullable=False,
        comment="Average monthly emissions for the industry",
    )

    unit = Column(
        String(50),
        nullable=False,
        default="kg CO2",
        comment="Unit of the average",
    )

    source = Column(
        String(200),
        nullable=True,
        comment="Source of the benchmark figure",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = ({"comment": "Industry average monthly emissions"},)

    def __repr__(self):
        return f"<IndustryBenchmarkDBModel: {self.industry} - {self.avg_monthly_emissions}>"
