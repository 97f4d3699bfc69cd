"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_HABIT_TABLES = (
    "water_intakes",
    "sunlight_sessions",
    "meditation_sessions",
    "sleep_records",
    "physical_activities",
    "task_items",
)


def _habit_columns() -> list:
    """Columns every dated habit table shares."""
    return [
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("profile_id", sa.Integer(), sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _habit_indexes(table: str) -> None:
    op.create_index(f"ix_{table}_id", table, ["id"])
    op.create_index(f"ix_{table}_day", table, ["day"])
    op.create_index(f"ix_{table}_profile_id", table, ["profile_id"])


def upgrade() -> None:
    # --- profiles ---
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(6, 2), nullable=False),
        sa.Column("height", sa.Numeric(6, 2), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("sleep_quality", sa.Integer(), nullable=False),
        sa.Column("sleep_hours", sa.Numeric(4, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"])

    # --- water_intakes ---
    op.create_table(
        "water_intakes",
        *_habit_columns(),
        sa.Column("amount_ml", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- sunlight_sessions ---
    op.create_table(
        "sunlight_sessions",
        *_habit_columns(),
        sa.Column("minutes", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- meditation_sessions ---
    op.create_table(
        "meditation_sessions",
        *_habit_columns(),
        sa.Column("minutes", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- sleep_records ---
    op.create_table(
        "sleep_records",
        *_habit_columns(),
        sa.Column("hours", sa.Numeric(4, 2), nullable=False),
        sa.Column("quality", sa.Integer(), nullable=False, comment="0-100"),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- physical_activities ---
    op.create_table(
        "physical_activities",
        *_habit_columns(),
        sa.Column("modality", sa.String(128), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- task_items ---
    op.create_table(
        "task_items",
        *_habit_columns(),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_complete", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    for table in _HABIT_TABLES:
        _habit_indexes(table)


def downgrade() -> None:
    for table in reversed(_HABIT_TABLES):
        op.drop_table(table)
    op.drop_index("ix_profiles_id", table_name="profiles")
    op.drop_table("profiles")
