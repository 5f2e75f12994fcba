"""Database models."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizprogress.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
CategoryStatsType = JSON().with_variant(JSONB(), "postgresql")


class User(Base):
    """User model for quiz takers."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    progress: Mapped["UserProgress"] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"


class UserProgress(Base):
    """Learning progress row, one per user."""

    __tablename__ = "user_progress"
    __table_args__ = (
        CheckConstraint("level >= 1 AND level <= 100", name="ck_user_progress_level"),
        CheckConstraint("experience >= 0", name="ck_user_progress_experience"),
        CheckConstraint("total_questions >= 0", name="ck_user_progress_total_questions"),
        CheckConstraint(
            "correct_answers >= 0 AND correct_answers <= total_questions",
            name="ck_user_progress_correct_answers",
        ),
        CheckConstraint("accuracy >= 0 AND accuracy <= 100", name="ck_user_progress_accuracy"),
        CheckConstraint("study_time_minutes >= 0", name="ck_user_progress_study_time"),
        CheckConstraint("current_streak >= 0", name="ck_user_progress_current_streak"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    accuracy: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal("0.00")
    )
    study_time_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_study_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    category_stats: Mapped[dict[str, Any]] = mapped_column(CategoryStatsType, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="progress")

    def __repr__(self) -> str:
        """String representation of UserProgress."""
        return f"<UserProgress(user_id={self.user_id}, level={self.level})>"
