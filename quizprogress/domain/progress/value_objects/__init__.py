"""Progress and gamification value objects."""

from .accuracy import Accuracy, Grade
from .category_stats import CategoryStat, CategoryStats
from .experience import DEFAULT_MAX_EXPERIENCE, Experience
from .level import Level
from .quiz_result import QuizResult
from .streak import Streak, StreakLevel
from .study_time import StudyTime

__all__ = [
    "DEFAULT_MAX_EXPERIENCE",
    "Accuracy",
    "CategoryStat",
    "CategoryStats",
    "Experience",
    "Grade",
    "Level",
    "QuizResult",
    "Streak",
    "StreakLevel",
    "StudyTime",
]
