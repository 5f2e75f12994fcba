"""Use case for applying a completed quiz to a user's progress."""

import structlog

from quizprogress.application.progress.protocols.user_repository import UserRepositoryProtocol
from quizprogress.domain.common.clock import Clock
from quizprogress.domain.common.result import Failure
from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.identity.exceptions import UserNotFoundError
from quizprogress.domain.progress.value_objects import QuizResult

logger = structlog.get_logger(__name__)


class CompleteQuizUseCase:
    """Use case for quiz completion."""

    def __init__(self, user_repository: UserRepositoryProtocol, clock: Clock) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.clock = clock

    def complete_quiz(
        self,
        user_id: int,
        correct_answers: int,
        total_questions: int,
        category: str,
        study_time_minutes: int,
    ) -> User:
        """
        Update the user's progress with a completed quiz.

        The user row is locked for the rest of the transaction so concurrent
        completions for the same user are applied one after the other.

        Args:
            user_id: ID of the user who completed the quiz
            correct_answers: Number of correctly answered questions
            total_questions: Number of questions in the quiz
            category: Category the quiz belongs to
            study_time_minutes: Time spent on the quiz

        Returns:
            User entity with the updated progress

        Raises:
            ValidationError: If the quiz result is invalid
            UserNotFoundError: If user is not found
        """
        result = QuizResult.create(correct_answers, total_questions, category, study_time_minutes)
        if isinstance(result, Failure):
            raise result.error
        quiz_result = result.value

        user = self.user_repository.find_by_id(UserId(user_id), for_update=True)
        if not user:
            raise UserNotFoundError(user_id)

        previous = user.progress
        user = self.user_repository.save(user.complete_quiz(quiz_result, self.clock))
        progress = user.progress

        logger.info(
            "quiz_completed",
            user_id=user_id,
            category=quiz_result.category,
            experience_gained=progress.experience.value - previous.experience.value,
            level=progress.level.value,
            leveled_up=progress.level.value > previous.level.value,
            streak=progress.current_streak.days,
        )

        return user
