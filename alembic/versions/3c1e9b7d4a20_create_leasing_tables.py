"""Create leasing partner and rate tables

Revision ID: 3c1e9b7d4a20
Revises:
Create Date: 2026-10-19 09:12:41.508317

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7d4a20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "leasing_partners",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("code", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )
    op.create_index(
        "uq_leasing_partners_code_upper",
        "leasing_partners",
        [sa.text("upper(code)")],
        unique=True,
    )
    op.create_table(
        "leasing_rates",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("leasing_partner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("vehicle_category", sa.String(length=10), nullable=False),
        sa.Column("vehicle_condition", sa.String(length=10), nullable=False),
        sa.Column("tenor", sa.Integer(), nullable=False),
        sa.Column("interest_rate", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("min_dp_percentage", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("max_dp_percentage", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("admin_fee", sa.Numeric(precision=14, scale=0), nullable=False),
        sa.ForeignKeyConstraint(
            ["leasing_partner_id"], ["leasing_partners.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "leasing_partner_id",
            "vehicle_category",
            "vehicle_condition",
            "tenor",
            name="uq_leasing_rates_partner_category_condition_tenor",
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("leasing_rates")
    op.drop_index("uq_leasing_partners_code_upper", table_name="leasing_partners")
    op.drop_table("leasing_partners")
