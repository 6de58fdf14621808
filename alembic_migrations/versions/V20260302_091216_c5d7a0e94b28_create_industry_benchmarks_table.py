"""create_industry_benchmarks_table

Revision ID: c5d7a0e94b28
Revises: 8b4e2d6f1c33
Create Date: 2026-03-02 09:12:16.774105

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c5d7a0e94b28"
down_revision = "8b4e2d6f1c33"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "industry_benchmarks",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "industry",
            sa.String(length=100),
            nullable=False,
            comment="Industry name (e.g., 'Restaurant', 'Logistics')",
        ),
        sa.Column(
            "avg_monthly_emissions",
            sa.Numeric(precision=12, scale=2),
            nullable=False,
            comment="Average monthly emissions for the industry",
        ),
        sa.Column(
            "unit",
            sa.String(length=50),
            nullable=False,
            comment="Unit of the average",
        ),
        sa.Column(
            "source",
            sa.String(length=200),
            nullable=True,
            comment="Source of the benchmark figure",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("industry"),
        comment="Industry average monthly emissions",
    )


def downgrade() -> None:
    op.drop_table("industry_benchmarks")
