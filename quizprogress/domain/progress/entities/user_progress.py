"""
UserProgress aggregate.

Combines the progress value objects into a single consistency boundary and
owns the quiz-completion transition. Every transition returns a new
snapshot; nothing is mutated in place.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Self, TypedDict

from quizprogress.domain.common.clock import Clock
from quizprogress.domain.common.exceptions import InvariantViolationError, ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import is_whole_number
from quizprogress.domain.progress.value_objects import (
    DEFAULT_MAX_EXPERIENCE,
    Accuracy,
    CategoryStats,
    Experience,
    Level,
    QuizResult,
    Streak,
    StudyTime,
)

# Experience calculation constants
XP_PER_CORRECT_ANSWER = 10
XP_PER_INCORRECT_ANSWER = 2
PERFECT_SCORE_BONUS_MULTIPLIER = 0.5


class UserProgressRow(TypedDict):
    """Persistence shape of a UserProgress snapshot."""

    level: int
    experience: int
    total_questions: int
    correct_answers: int
    accuracy: str  # decimal string, e.g. "80.00"
    study_time_minutes: int
    current_streak: int
    last_study_date: datetime | None
    category_stats: dict[str, Any]
    updated_at: datetime


def days_between(earlier: datetime, later: datetime) -> int:
    """
    Absolute number of calendar days between two instants.

    Both instants are reduced to their date; when both carry a timezone the
    first is expressed in the second's zone before that.
    """
    if earlier.tzinfo is not None and later.tzinfo is not None:
        earlier = earlier.astimezone(later.tzinfo)
    return abs((later.date() - earlier.date()).days)


@dataclass(frozen=True)
class UserProgress:
    """
    A user's learning progress and statistics.

    Business Rules:
    - Correct answers can never exceed total questions answered
    - Level is always derived from experience after a quiz completion
    - The streak counts consecutive calendar days with a completed quiz
    """

    level: Level
    experience: Experience
    total_questions: int
    correct_answers: int
    accuracy: Accuracy
    study_time: StudyTime
    current_streak: Streak
    last_study_date: datetime | None
    category_stats: CategoryStats
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.total_questions < 0 or self.correct_answers < 0:
            raise InvariantViolationError(
                "UserProgress",
                f"question counts cannot be negative (correct_answers={self.correct_answers}, "
                f"total_questions={self.total_questions})",
            )
        if self.correct_answers > self.total_questions:
            raise InvariantViolationError(
                "UserProgress",
                f"correct_answers ({self.correct_answers}) cannot exceed "
                f"total_questions ({self.total_questions})",
            )

    @classmethod
    def create(cls, clock: Clock, experience_cap: int = DEFAULT_MAX_EXPERIENCE) -> Self:
        """
        Create progress for a newly registered user.

        Args:
            clock: Source of the creation timestamp
            experience_cap: Maximum experience a user can accumulate

        Returns:
            UserProgress at level 1 with no activity recorded
        """
        return cls(
            level=Level(1),
            experience=Experience(0, experience_cap),
            total_questions=0,
            correct_answers=0,
            accuracy=Accuracy(0.0),
            study_time=StudyTime(0),
            current_streak=Streak(0),
            last_study_date=None,
            category_stats=CategoryStats.create_empty(),
            updated_at=clock.now(),
        )

    @classmethod
    def from_persistence(
        cls,
        row: Mapping[str, Any],
        experience_cap: int = DEFAULT_MAX_EXPERIENCE,
    ) -> Result[Self, ValidationError]:
        """
        Restore progress from a stored row.

        Args:
            row: Mapping with the keys of UserProgressRow
            experience_cap: Maximum experience a user can accumulate

        Returns:
            Success with the restored UserProgress, or Failure describing
            the first invalid field
        """
        raw_accuracy = row["accuracy"]
        try:
            parsed_accuracy = Decimal(str(raw_accuracy))
        except InvalidOperation:
            parsed_accuracy = None
        if parsed_accuracy is None or not parsed_accuracy.is_finite():
            return Failure(
                ValidationError(
                    f"Invalid accuracy value in database: {raw_accuracy}",
                    field="accuracy",
                    value=raw_accuracy,
                )
            )

        total_questions = row["total_questions"]
        correct_answers = row["correct_answers"]
        counts = (("total_questions", total_questions), ("correct_answers", correct_answers))
        for name, count in counts:
            if not is_whole_number(count) or count < 0:
                return Failure(
                    ValidationError(
                        f"Invalid progress data: {name} must be a non-negative whole number",
                        field=name,
                        value=count,
                    )
                )
        if correct_answers > total_questions:
            return Failure(
                ValidationError(
                    f"Invalid progress data: correct_answers ({correct_answers}) "
                    f"cannot exceed total_questions ({total_questions})",
                    field="correct_answers",
                    value=correct_answers,
                )
            )

        level = Level.create(row["level"])
        experience = Experience.create(row["experience"], experience_cap)
        accuracy = Accuracy.create(float(parsed_accuracy))
        study_time = StudyTime.create(row["study_time_minutes"])
        streak = Streak.create(row["current_streak"])
        category_stats = CategoryStats.create(row["category_stats"])

        for part in (level, experience, accuracy, study_time, streak, category_stats):
            if isinstance(part, Failure):
                return Failure(part.error)

        return Success(
            cls(
                level=level.unwrap(),
                experience=experience.unwrap(),
                total_questions=total_questions,
                correct_answers=correct_answers,
                accuracy=accuracy.unwrap(),
                study_time=study_time.unwrap(),
                current_streak=streak.unwrap(),
                last_study_date=row["last_study_date"],
                category_stats=category_stats.unwrap(),
                updated_at=row["updated_at"],
            )
        )

    def add_quiz_result(self, result: QuizResult, clock: Clock) -> Self:
        """
        Apply a completed quiz to this progress.

        Experience, totals, accuracy, study time and category statistics are
        accumulated first; the level is then derived from the new experience
        and the streak is advanced against the previous study date.

        Raises:
            InvariantViolationError: If an accumulated value cannot be represented
        """
        total_questions = self.total_questions + result.total_questions
        correct_answers = self.correct_answers + result.correct_answers

        before_streak_update = replace(
            self,
            experience=self._add_experience(result),
            total_questions=total_questions,
            correct_answers=correct_answers,
            accuracy=Accuracy.from_quiz_results(correct_answers, total_questions),
            study_time=self._add_study_time(result),
            category_stats=self.category_stats.add_results(
                result.category, result.correct_answers, result.total_questions
            ),
            updated_at=clock.now(),
        )

        return before_streak_update.calculate_level().update_streak(clock)

    def calculate_level(self) -> Self:
        """Derive the level from the current experience."""
        return replace(self, level=Level.from_experience(self.experience.value))

    def update_streak(self, clock: Clock) -> Self:
        """
        Advance the streak for a study session happening now.

        - First session ever: streak starts at 1
        - Same day: streak is kept (at least 1)
        - Next day: streak grows by one
        - Longer gap: streak restarts at 1
        """
        now = clock.now()

        if self.last_study_date is None:
            new_streak = Streak(1)
        else:
            days_diff = days_between(self.last_study_date, now)
            if days_diff == 0:
                new_streak = self.current_streak if self.current_streak.is_active() else Streak(1)
            elif days_diff == 1:
                new_streak = self.current_streak.increment()
            else:
                new_streak = Streak(1)

        return replace(self, current_streak=new_streak, last_study_date=now, updated_at=now)

    def to_persistence(self) -> UserProgressRow:
        return UserProgressRow(
            level=self.level.to_primitive(),
            experience=self.experience.to_primitive(),
            total_questions=self.total_questions,
            correct_answers=self.correct_answers,
            accuracy=self.accuracy.to_decimal_string(),
            study_time_minutes=self.study_time.to_primitive(),
            current_streak=self.current_streak.to_primitive(),
            last_study_date=self.last_study_date,
            category_stats=self.category_stats.to_json(),
            updated_at=self.updated_at,
        )

    @staticmethod
    def calculate_experience_gain(result: QuizResult) -> int:
        """
        Experience earned for a quiz.

        Correct answers earn XP_PER_CORRECT_ANSWER, incorrect ones a
        consolation XP_PER_INCORRECT_ANSWER; a perfect score adds half a
        point per question (rounded down).
        """
        gain = result.correct_answers * XP_PER_CORRECT_ANSWER
        gain += result.incorrect_answers * XP_PER_INCORRECT_ANSWER
        if result.is_perfect_score:
            gain += int(result.total_questions * PERFECT_SCORE_BONUS_MULTIPLIER)
        return gain

    def _add_experience(self, result: QuizResult) -> Experience:
        added = self.experience.add(self.calculate_experience_gain(result))
        if isinstance(added, Failure):
            raise InvariantViolationError(
                "UserProgress", f"failed to add experience points: {added.error.message}"
            )
        return added.value

    def _add_study_time(self, result: QuizResult) -> StudyTime:
        added = self.study_time.add_minutes(result.study_time_minutes)
        if isinstance(added, Failure):
            raise InvariantViolationError(
                "UserProgress", f"failed to add study time: {added.error.message}"
            )
        return added.value
