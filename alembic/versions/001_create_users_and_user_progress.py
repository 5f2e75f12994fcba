"""Create users and user_progress tables.

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create users and user_progress tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)

    op.create_table(
        "user_progress",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("experience", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_questions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("correct_answers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accuracy", sa.Numeric(5, 2), nullable=False, server_default="0.00"),
        sa.Column("study_time_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("current_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_study_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "category_stats",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
        sa.CheckConstraint("level >= 1 AND level <= 100", name="ck_user_progress_level"),
        sa.CheckConstraint("experience >= 0", name="ck_user_progress_experience"),
        sa.CheckConstraint("total_questions >= 0", name="ck_user_progress_total_questions"),
        sa.CheckConstraint(
            "correct_answers >= 0 AND correct_answers <= total_questions",
            name="ck_user_progress_correct_answers",
        ),
        sa.CheckConstraint(
            "accuracy >= 0 AND accuracy <= 100", name="ck_user_progress_accuracy"
        ),
        sa.CheckConstraint("study_time_minutes >= 0", name="ck_user_progress_study_time"),
        sa.CheckConstraint("current_streak >= 0", name="ck_user_progress_current_streak"),
    )


def downgrade() -> None:
    """Drop user_progress and users tables."""
    op.drop_table("user_progress")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
