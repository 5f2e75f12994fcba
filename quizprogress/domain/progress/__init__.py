"""Progress domain layer: gamification value objects and the UserProgress aggregate."""

from quizprogress.domain.progress.entities import UserProgress, UserProgressRow
from quizprogress.domain.progress.exceptions import CorruptedProgressError
from quizprogress.domain.progress.value_objects import (
    Accuracy,
    CategoryStat,
    CategoryStats,
    Experience,
    Level,
    QuizResult,
    Streak,
    StudyTime,
)

__all__ = [
    "Accuracy",
    "CategoryStat",
    "CategoryStats",
    "CorruptedProgressError",
    "Experience",
    "Level",
    "QuizResult",
    "Streak",
    "StudyTime",
    "UserProgress",
    "UserProgressRow",
]
