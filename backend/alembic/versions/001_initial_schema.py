"""Create calendar_settings, day_events, birthdays and holidays tables.

Revision ID: 001
Revises:
Create Date: 2025-01-30
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "calendar_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("anchor_mode", sa.String(10), nullable=False, server_default="group"),
        sa.Column("group", sa.String(10), nullable=False, server_default="1"),
        sa.Column("manual_date", sa.Date(), nullable=True),
        sa.Column("show_holidays", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("week_starts_on_monday", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("shift_colors", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "day_events",
        sa.Column("date_key", sa.String(10), primary_key=True),
        sa.Column("note", sa.Text(), nullable=False, server_default=""),
        sa.Column("has_vacation", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("colleagues", ARRAY(sa.Text()), nullable=False, server_default="{}"),
        sa.Column("is_afz", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_personal_vacation", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "birthdays",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("day", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("month", "day", name="uq_birthdays_month_day"),
    )

    op.create_table(
        "holidays",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("subdivision", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("fetched_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("day", "subdivision", name="uq_holidays_day_subdivision"),
    )
    op.create_index("ix_holidays_subdivision_day", "holidays", ["subdivision", "day"])


def downgrade() -> None:
    op.drop_index("ix_holidays_subdivision_day", table_name="holidays")
    op.drop_table("holidays")
    op.drop_table("birthdays")
    op.drop_table("day_events")
    op.drop_table("calendar_settings")
