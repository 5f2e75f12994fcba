"""Experience value object: a bounded, non-negative point total."""

from dataclasses import dataclass, field
from typing import Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject, is_whole_number

DEFAULT_MAX_EXPERIENCE = 1_000_000

BASE_CORRECT_POINTS = 10
BASE_INCORRECT_POINTS = 2  # Consolation points
DIFFICULTY_LEVELS = (1, 2, 3)


@dataclass(frozen=True)
class Experience(ValueObject):
    """
    Accumulated experience points.

    Business Rules:
    - Experience is a whole number between 0 and `cap`
    - Adding points never overflows: the cap silently absorbs the excess
    - The cap is configuration, so it does not take part in equality
    """

    value: int
    cap: int = field(default=DEFAULT_MAX_EXPERIENCE, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not is_whole_number(self.cap) or self.cap < 0:
            raise ValidationError(
                "Experience cap must be a non-negative whole number", field="cap", value=self.cap
            )
        if not is_whole_number(self.value):
            raise ValidationError(
                "Experience must be a whole number", field="experience", value=self.value
            )
        if self.value < 0:
            raise ValidationError(
                "Experience cannot be negative", field="experience", value=self.value
            )
        if self.value > self.cap:
            raise ValidationError(
                f"Experience cannot exceed {self.cap}", field="experience", value=self.value
            )

    @classmethod
    def create(cls, value: int, cap: int = DEFAULT_MAX_EXPERIENCE) -> Result[Self, ValidationError]:
        """Create Experience, failing for negative, fractional or over-cap values."""
        try:
            return Success(cls(value, cap))
        except ValidationError as e:
            return Failure(e)

    def add(self, points: int) -> Result[Self, ValidationError]:
        """
        Add experience points.

        Args:
            points: Non-negative number of points to add

        Returns:
            Success with the new Experience (capped), or Failure for negative points
        """
        if points < 0:
            return Failure(
                ValidationError("Cannot add negative experience", field="points", value=points)
            )
        return self.create(min(self.value + points, self.cap), self.cap)

    @staticmethod
    def calculate_points(is_correct: bool, difficulty: int) -> int:
        """
        Points for a single answer, scaled by question difficulty.

        Difficulty 1 (easy), 2 (medium) and 3 (hard) multiply the base award;
        any other value counts as 1. The quiz-completion transition uses its
        own flat per-answer scheme; this scorer is for per-question awards.
        """
        base_points = BASE_CORRECT_POINTS if is_correct else BASE_INCORRECT_POINTS
        multiplier = difficulty if difficulty in DIFFICULTY_LEVELS else 1
        return base_points * multiplier

    def to_primitive(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
