"""create habit tables

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_habits_id", "habits", ["id"], unique=False)
    op.create_index("ix_habits_created_at", "habits", ["created_at"], unique=False)

    op.create_table(
        "habit_entries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("habit_id", sa.Integer(), sa.ForeignKey("habits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("habit_id", "entry_date", name="uq_habit_entry_per_day"),
    )
    op.create_index("ix_habit_entries_id", "habit_entries", ["id"], unique=False)
    op.create_index("ix_habit_entries_habit_id", "habit_entries", ["habit_id"], unique=False)
    op.create_index("ix_habit_entries_entry_date", "habit_entries", ["entry_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_habit_entries_entry_date", table_name="habit_entries")
    op.drop_index("ix_habit_entries_habit_id", table_name="habit_entries")
    op.drop_index("ix_habit_entries_id", table_name="habit_entries")
    op.drop_table("habit_entries")

    op.drop_index("ix_habits_created_at", table_name="habits")
    op.drop_index("ix_habits_id", table_name="habits")
    op.drop_table("habits")
