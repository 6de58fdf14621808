"""create_emission_factors_table

Revision ID: 8b4e2d6f1c33
Revises: 3f1a9c2b7d10
Create Date: 2026-03-02 09:12:10.402917

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8b4e2d6f1c33"
down_revision = "3f1a9c2b7d10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "emission_factors",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "category_id",
            sa.UUID(),
            nullable=False,
            comment="Category this factor applies to",
        ),
        sa.Column(
            "factor",
            sa.Numeric(precision=10, scale=6),
            nullable=False,
            comment="Emission factor value (kg CO2 per category unit)",
        ),
        sa.Column(
            "unit",
            sa.String(length=100),
            nullable=False,
            comment="Factor unit (e.g., 'kg CO2 per litre')",
        ),
        sa.Column(
            "source",
            sa.String(length=200),
            nullable=True,
            comment="Source of the emission factor (e.g., 'IPCC 2023', 'EPA 2023')",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ["category_id"], ["activity_categories.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("category_id"),
        comment="Emission factor per activity category",
    )


def downgrade() -> None:
    op.drop_table("emission_factors")
