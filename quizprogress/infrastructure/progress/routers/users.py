"""User registration and progress endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, status

from quizprogress.application.progress.use_cases import (
    CompleteQuizUseCase,
    GetUserProgressUseCase,
    RegisterUserUseCase,
)
from quizprogress.core import container
from quizprogress.domain.common.exceptions import DomainError
from quizprogress.infrastructure.common.di import inject_use_case
from quizprogress.infrastructure.progress.schemas import (
    CompleteQuizRequest,
    UserRegisterRequest,
    UserResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserIdPath = Annotated[int, Path(ge=1, description="ID of the user")]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> UserResponse:
    """
    Register a new user.

    The user starts at level 1 with empty statistics.
    """
    try:
        user = use_case.register_user(register_data.email, register_data.username)
        return UserResponse.from_domain(user)
    except DomainError:
        # Handled by the application exception handlers
        raise
    except Exception as e:
        logger.error("failed_to_register_user", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{user_id}/progress", response_model=UserResponse)
async def get_user_progress(
    user_id: UserIdPath,
    use_case: GetUserProgressUseCase = Depends(
        inject_use_case(container.get_user_progress_use_case)
    ),
) -> UserResponse:
    """Get a user's level, experience, accuracy, streak and per-category statistics."""
    try:
        return UserResponse.from_domain(use_case.get_user(user_id))
    except DomainError:
        raise
    except Exception as e:
        logger.error("failed_to_get_user_progress", user_id=user_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/{user_id}/progress/quiz-completions", response_model=UserResponse)
async def complete_quiz(
    user_id: UserIdPath,
    quiz_data: CompleteQuizRequest,
    use_case: CompleteQuizUseCase = Depends(inject_use_case(container.complete_quiz_use_case)),
) -> UserResponse:
    """
    Record a completed quiz.

    Awards experience, recalculates the level and accuracy, adds the study
    time, updates the category statistics and advances the daily streak.
    """
    try:
        user = use_case.complete_quiz(
            user_id=user_id,
            correct_answers=quiz_data.correct_answers,
            total_questions=quiz_data.total_questions,
            category=quiz_data.category,
            study_time_minutes=quiz_data.study_time_minutes,
        )
        return UserResponse.from_domain(user)
    except DomainError:
        raise
    except Exception as e:
        logger.error("failed_to_complete_quiz", user_id=user_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
