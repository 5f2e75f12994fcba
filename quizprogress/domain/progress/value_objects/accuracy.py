"""Accuracy value object: quiz performance as a percentage."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject

MIN_ACCURACY = 0.0
MAX_ACCURACY = 100.0
DECIMAL_PLACES = 2
_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)

Grade = Literal["A", "B", "C", "D", "F"]

# (lower bound, grade), checked top-down
GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


def round_percentage(value: float) -> float:
    """Round to DECIMAL_PLACES with ties going up, so 3.125 becomes 3.13."""
    return float(Decimal(str(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def percentage(correct: int, total: int) -> float:
    """
    Rounded share of correct answers, capped at MAX_ACCURACY.

    Unlike `Accuracy.from_quiz_results` this never raises: stored per-category
    totals are allowed to hold more correct answers than questions.
    """
    if total == 0:
        return 0.0
    return min(round_percentage(correct / total * 100), MAX_ACCURACY)


@dataclass(frozen=True)
class Accuracy(ValueObject):
    """Percentage of correct answers in [0, 100], rounded to 2 decimal places."""

    value: float

    def __post_init__(self) -> None:
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int | float)
            or math.isnan(self.value)
        ):
            raise ValidationError("Accuracy must be a number", field="accuracy", value=self.value)
        if self.value < MIN_ACCURACY or self.value > MAX_ACCURACY:
            raise ValidationError(
                "Accuracy must be between 0 and 100", field="accuracy", value=self.value
            )
        object.__setattr__(self, "value", round_percentage(self.value))

    @classmethod
    def create(cls, value: float) -> Result[Self, ValidationError]:
        """Create Accuracy from a percentage value (0-100)."""
        try:
            return Success(cls(value))
        except ValidationError as e:
            return Failure(e)

    @classmethod
    def from_quiz_results(cls, correct_answers: int, total_questions: int) -> Self:
        """
        Calculate accuracy from answer counts.

        Defined for 0 <= correct_answers <= total_questions; no questions
        answered yields 0%.
        """
        if total_questions == 0:
            return cls(0.0)
        return cls(correct_answers / total_questions * 100)

    def recalculate(
        self,
        current_correct: int,
        current_total: int,
        new_correct: int,
        new_total: int,
    ) -> Self:
        """
        Recalculate accuracy with new quiz results.

        Args:
            current_correct: Current total correct answers
            current_total: Current total questions
            new_correct: New correct answers to add
            new_total: New total questions to add
        """
        return self.from_quiz_results(current_correct + new_correct, current_total + new_total)

    def get_grade(self) -> Grade:
        """Letter grade for this accuracy."""
        for threshold, grade in GRADE_THRESHOLDS:
            if self.value >= threshold:
                return grade
        return "F"

    def to_decimal_string(self) -> str:
        """Fixed two-decimal representation, as stored in a decimal(5, 2) column."""
        return f"{self.value:.{DECIMAL_PLACES}f}"

    def __str__(self) -> str:
        return f"{self.to_decimal_string()}%"
