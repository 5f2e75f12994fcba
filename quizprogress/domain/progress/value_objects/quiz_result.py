"""QuizResult value object: the outcome of one completed quiz attempt."""

from dataclasses import dataclass
from typing import Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject, is_whole_number


@dataclass(frozen=True)
class QuizResult(ValueObject):
    """
    Quiz-completion event payload.

    Business Rules:
    - Counts and study minutes are non-negative whole numbers
    - Correct answers cannot exceed total questions
    - Category cannot be empty
    """

    correct_answers: int
    total_questions: int
    category: str
    study_time_minutes: int

    def __post_init__(self) -> None:
        for field_name in ("correct_answers", "total_questions", "study_time_minutes"):
            value = getattr(self, field_name)
            if not is_whole_number(value) or value < 0:
                raise ValidationError(
                    f"{field_name} must be a non-negative whole number",
                    field=field_name,
                    value=value,
                )
        if self.correct_answers > self.total_questions:
            raise ValidationError(
                "Correct answers cannot exceed total questions",
                field="correct_answers",
                value=self.correct_answers,
            )
        if not isinstance(self.category, str) or not self.category.strip():
            raise ValidationError("Category cannot be empty", field="category", value=self.category)

    @classmethod
    def create(
        cls,
        correct_answers: int,
        total_questions: int,
        category: str,
        study_time_minutes: int,
    ) -> Result[Self, ValidationError]:
        try:
            return Success(cls(correct_answers, total_questions, category, study_time_minutes))
        except ValidationError as e:
            return Failure(e)

    @property
    def incorrect_answers(self) -> int:
        return self.total_questions - self.correct_answers

    @property
    def is_perfect_score(self) -> bool:
        return self.total_questions > 0 and self.correct_answers == self.total_questions
