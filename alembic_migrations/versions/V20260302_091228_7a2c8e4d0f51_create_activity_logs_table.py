"""create_activity_logs_table

Revision ID: 7a2c8e4d0f51
Revises: 1e9f3b7c5a46
Create Date: 2026-03-02 09:12:28.559210

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "7a2c8e4d0f51"
down_revision = "1e9f3b7c5a46"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activity_logs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "business_id",
            sa.UUID(),
            nullable=False,
            comment="Owning business",
        ),
        sa.Column(
            "category_id",
            sa.UUID(),
            nullable=False,
            comment="Emission category",
        ),
        sa.Column(
            "quantity",
            sa.Numeric(precision=14, scale=4),
            nullable=False,
            comment="Activity quantity in the category unit",
        ),
        sa.Column(
            "co2_emission",
            sa.Numeric(precision=14, scale=4),
            nullable=False,
            comment="CO2 emission in kg, frozen at creation time",
        ),
        sa.Column(
            "scope",
            sa.Integer(),
            nullable=False,
            comment="GHG Protocol scope, copied from the category at creation time",
        ),
        sa.Column(
            "date",
            sa.Date(),
            nullable=False,
            comment="Date when the activity occurred",
        ),
        sa.Column("notes", sa.String(), nullable=True, comment="Free-text note"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ["business_id"], ["businesses.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["category_id"], ["activity_categories.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        comment="Logged activities with frozen CO2 results",
    )
    op.create_index(
        "ix_activity_logs_business_date",
        "activity_logs",
        ["business_id", "date"],
        unique=False,
    )
    op.create_index(
        "ix_activity_logs_business_scope",
        "activity_logs",
        ["business_id", "scope"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_activity_logs_business_scope", table_name="activity_logs")
    op.drop_index("ix_activity_logs_business_date", table_name="activity_logs")
    op.drop_table("activity_logs")
