"""
Level value object.

Levels follow a simple linear curve: every XP_PER_LEVEL experience points
unlock the next level, up to MAX_LEVEL.
"""

from dataclasses import dataclass
from typing import Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject, is_whole_number

MIN_LEVEL = 1
MAX_LEVEL = 100
XP_PER_LEVEL = 100


@dataclass(frozen=True)
class Level(ValueObject):
    """A user's progression tier, between MIN_LEVEL and MAX_LEVEL."""

    value: int

    def __post_init__(self) -> None:
        if not is_whole_number(self.value):
            raise ValidationError("Level must be a whole number", field="level", value=self.value)
        if self.value < MIN_LEVEL:
            raise ValidationError(
                f"Level must be at least {MIN_LEVEL}", field="level", value=self.value
            )
        if self.value > MAX_LEVEL:
            raise ValidationError(
                f"Level cannot exceed {MAX_LEVEL}", field="level", value=self.value
            )

    @classmethod
    def create(cls, value: int) -> Result[Self, ValidationError]:
        """Create a Level, failing when the value is outside [MIN_LEVEL, MAX_LEVEL]."""
        try:
            return Success(cls(value))
        except ValidationError as e:
            return Failure(e)

    @classmethod
    def from_experience(cls, experience: int) -> Self:
        """
        Derive the level reached with the given experience.

        Out-of-range experience is clamped rather than rejected.
        """
        calculated = experience // XP_PER_LEVEL + 1
        return cls(max(MIN_LEVEL, min(calculated, MAX_LEVEL)))

    def experience_required(self) -> int:
        """Experience needed to reach the next level (0 at the cap)."""
        if self.is_max_level():
            return 0
        return self.value * XP_PER_LEVEL

    def experience_for_level(self) -> int:
        """Total experience needed to reach this level."""
        return (self.value - 1) * XP_PER_LEVEL

    def is_max_level(self) -> bool:
        return self.value >= MAX_LEVEL

    def __str__(self) -> str:
        return str(self.value)
