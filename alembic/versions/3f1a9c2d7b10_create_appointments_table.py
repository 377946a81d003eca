"""Create appointments table

Revision ID: 3f1a9c2d7b10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2d7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the appointments table."""
    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("scheduled_on", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_appointments_id", "appointments", ["id"], unique=False)
    op.create_index(
        "ix_appointments_scheduled_on", "appointments", ["scheduled_on"], unique=False
    )


def downgrade() -> None:
    """Drop the appointments table."""
    op.drop_index("ix_appointments_scheduled_on", table_name="appointments")
    op.drop_index("ix_appointments_id", table_name="appointments")
    op.drop_table("appointments")
