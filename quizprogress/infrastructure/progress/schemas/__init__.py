"""Progress context schemas."""

from quizprogress.infrastructure.progress.schemas.progress_schemas import (
    CategoryStatResponse,
    CompleteQuizRequest,
    UserProgressResponse,
    UserRegisterRequest,
    UserResponse,
)

__all__ = [
    "CategoryStatResponse",
    "CompleteQuizRequest",
    "UserProgressResponse",
    "UserRegisterRequest",
    "UserResponse",
]
