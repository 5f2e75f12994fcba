"""Streak value object: consecutive days with recorded study activity."""

from dataclasses import dataclass
from typing import Literal, Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject, is_whole_number

StreakLevel = Literal["none", "beginner", "regular", "dedicated", "champion", "legend"]

# (exclusive upper bound in days, level), checked in order
STREAK_LEVEL_THRESHOLDS: tuple[tuple[int, StreakLevel], ...] = (
    (7, "beginner"),
    (21, "regular"),
    (50, "dedicated"),
    (100, "champion"),
)


@dataclass(frozen=True)
class Streak(ValueObject):
    days: int

    def __post_init__(self) -> None:
        if not is_whole_number(self.days):
            raise ValidationError(
                "Streak days must be a whole number", field="streak", value=self.days
            )
        if self.days < 0:
            raise ValidationError("Streak days cannot be negative", field="streak", value=self.days)

    @classmethod
    def create(cls, days: int) -> Result[Self, ValidationError]:
        try:
            return Success(cls(days))
        except ValidationError as e:
            return Failure(e)

    def increment(self) -> Self:
        return type(self)(self.days + 1)

    def reset(self) -> Self:
        return type(self)(0)

    def is_active(self) -> bool:
        return self.days > 0

    def get_streak_level(self) -> StreakLevel:
        if self.days == 0:
            return "none"
        for upper_bound, level in STREAK_LEVEL_THRESHOLDS:
            if self.days < upper_bound:
                return level
        return "legend"

    def __str__(self) -> str:
        return str(self.days)
