"""create_carbon_intensity_scores_table

Revision ID: d4b6f8a2e917
Revises: 7a2c8e4d0f51
Create Date: 2026-03-02 09:12:34.881473

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "d4b6f8a2e917"
down_revision = "7a2c8e4d0f51"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "carbon_intensity_scores",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "business_id",
            sa.UUID(),
            nullable=False,
            comment="Scored business",
        ),
        sa.Column("month", sa.Integer(), nullable=False, comment="Month (1-12)"),
        sa.Column("year", sa.Integer(), nullable=False, comment="Year"),
        sa.Column(
            "score",
            sa.Numeric(precision=5, scale=2),
            nullable=False,
            comment="Carbon intensity score (0-100)",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ["business_id"], ["businesses.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "business_id", "month", "year", name="uq_carbon_intensity_scores_period"
        ),
        comment="Latest carbon intensity score per business and month",
    )


def downgrade() -> None:
    op.drop_table("carbon_intensity_scores")
