"""Pydantic schemas for user and progress API request/response validation."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, Field, model_validator

from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.progress.value_objects import Grade, StreakLevel

MAX_CATEGORY_LENGTH = 50
MAX_STUDY_MINUTES_PER_QUIZ = 1440


class UserRegisterRequest(BaseModel):
    """Schema for registering a new user."""

    email: str = Field(..., min_length=3, max_length=100, description="User's email address")
    username: str = Field(
        ...,
        min_length=2,
        max_length=50,
        pattern=r"^[a-zA-Z0-9_-]+$",
        description="Display name (letters, numbers, underscores, hyphens)",
    )


class CompleteQuizRequest(BaseModel):
    """Schema for submitting a completed quiz."""

    correct_answers: int = Field(..., ge=0, description="Number of correct answers")
    total_questions: int = Field(..., ge=1, description="Number of questions in the quiz")
    category: str = Field(
        ..., min_length=1, max_length=MAX_CATEGORY_LENGTH, description="Quiz category"
    )
    study_time_minutes: int = Field(
        0, ge=0, le=MAX_STUDY_MINUTES_PER_QUIZ, description="Minutes spent on the quiz"
    )

    @model_validator(mode="after")
    def check_correct_not_above_total(self) -> Self:
        if self.correct_answers > self.total_questions:
            raise ValueError("correct_answers cannot exceed total_questions")
        return self


class CategoryStatResponse(BaseModel):
    """Schema for the statistics of a single category."""

    correct: int
    total: int
    accuracy: float


class UserProgressResponse(BaseModel):
    """Schema for a user's learning progress."""

    level: int = Field(..., description="Current level (1-100)")
    experience: int = Field(..., description="Total experience points")
    experience_to_next_level: int = Field(
        ..., description="Experience still needed for the next level (0 at max level)"
    )
    total_questions: int
    correct_answers: int
    accuracy: float = Field(..., description="Overall accuracy percentage")
    grade: Grade
    study_time_minutes: int
    study_time_formatted: str = Field(..., description="Study time, e.g. '1h 5m'")
    current_streak: int
    streak_level: StreakLevel
    last_study_date: datetime | None
    category_stats: dict[str, CategoryStatResponse]
    updated_at: datetime


class UserResponse(BaseModel):
    """Schema for a user together with their progress."""

    id: int
    email: str
    username: str
    progress: UserProgressResponse
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> Self:
        progress = user.progress
        stats = progress.category_stats
        return cls(
            id=user.id.value,
            email=user.email,
            username=user.username,
            created_at=user.created_at,
            progress=UserProgressResponse(
                level=progress.level.value,
                experience=progress.experience.value,
                experience_to_next_level=max(
                    0, progress.level.experience_required() - progress.experience.value
                ),
                total_questions=progress.total_questions,
                correct_answers=progress.correct_answers,
                accuracy=progress.accuracy.value,
                grade=progress.accuracy.get_grade(),
                study_time_minutes=progress.study_time.minutes,
                study_time_formatted=progress.study_time.format_duration(),
                current_streak=progress.current_streak.days,
                streak_level=progress.current_streak.get_streak_level(),
                last_study_date=progress.last_study_date,
                category_stats={
                    name: CategoryStatResponse(
                        correct=stat.correct, total=stat.total, accuracy=stat.accuracy
                    )
                    for name in stats.get_all_categories()
                    if (stat := stats.get_category_stats(name)) is not None
                },
                updated_at=progress.updated_at,
            ),
        )
