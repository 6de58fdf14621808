"""create_activity_categories_table

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-03-02 09:12:04.118342

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activity_categories",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "name",
            sa.String(length=200),
            nullable=False,
            comment="Category name (e.g., 'Diesel', 'Electricity')",
        ),
        sa.Column(
            "unit",
            sa.String(length=50),
            nullable=False,
            comment="Unit the activity quantity is measured in (e.g., litres, kWh, km)",
        ),
        sa.Column(
            "scope",
            sa.Integer(),
            nullable=False,
            comment="GHG Protocol scope (1, 2, or 3)",
        ),
        sa.Column(
            "description",
            sa.String(),
            nullable=True,
            comment="What activities belong to this category",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        comment="Emission categories grouped by GHG Protocol scope",
    )
    op.create_index(
        "ix_activity_categories_scope",
        "activity_categories",
        ["scope"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_activity_categories_scope", table_name="activity_categories")
    op.drop_table("activity_categories")
