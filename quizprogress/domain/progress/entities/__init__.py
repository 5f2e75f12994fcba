from .user_progress import UserProgress, UserProgressRow, days_between

__all__ = [
    "UserProgress",
    "UserProgressRow",
    "days_between",
]
