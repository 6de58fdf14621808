"""create_businesses_table

Revision ID: 1e9f3b7c5a46
Revises: c5d7a0e94b28
Create Date: 2026-03-02 09:12:22.036581

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "1e9f3b7c5a46"
down_revision = "c5d7a0e94b28"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "businesses",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "user_id",
            sa.UUID(),
            nullable=False,
            comment="Owning user account (issued by the auth layer)",
        ),
        sa.Column(
            "name",
            sa.String(length=200),
            nullable=False,
            comment="Business name",
        ),
        sa.Column(
            "industry",
            sa.String(length=100),
            nullable=False,
            comment="Industry name, must exist in industry_benchmarks",
        ),
        sa.Column(
            "location",
            sa.String(length=200),
            nullable=True,
            comment="City or region",
        ),
        sa.Column(
            "employee_count",
            sa.Integer(),
            nullable=True,
            comment="Number of employees",
        ),
        sa.Column(
            "annual_revenue",
            sa.Numeric(precision=16, scale=2),
            nullable=True,
            comment="Annual revenue",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        comment="Business profiles, one per user account",
    )
    op.create_index(
        op.f("ix_businesses_industry"),
        "businesses",
        ["industry"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_businesses_industry"), table_name="businesses")
    op.drop_table("businesses")
