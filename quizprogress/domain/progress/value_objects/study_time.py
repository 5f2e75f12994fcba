"""StudyTime value object: time spent studying, in whole minutes."""

import math
from dataclasses import dataclass
from typing import Self

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import ValueObject, is_whole_number

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class StudyTime(ValueObject):
    minutes: int

    def __post_init__(self) -> None:
        if not is_whole_number(self.minutes):
            raise ValidationError(
                "Study time must be in whole minutes", field="study_time", value=self.minutes
            )
        if self.minutes < 0:
            raise ValidationError(
                "Study time cannot be negative", field="study_time", value=self.minutes
            )

    @classmethod
    def create(cls, minutes: int) -> Result[Self, ValidationError]:
        try:
            return Success(cls(minutes))
        except ValidationError as e:
            return Failure(e)

    @classmethod
    def from_hours(cls, hours: float) -> Self:
        """Create StudyTime from hours, rounding half-up to the nearest minute."""
        return cls(math.floor(hours * MINUTES_PER_HOUR + 0.5))

    def add_minutes(self, minutes: int) -> Result[Self, ValidationError]:
        if minutes < 0:
            return Failure(
                ValidationError("Cannot add negative study time", field="minutes", value=minutes)
            )
        return self.create(self.minutes + minutes)

    def to_hours(self) -> float:
        """Convert to hours, rounded to 2 decimal places."""
        return round(self.minutes / MINUTES_PER_HOUR, 2)

    def format_duration(self) -> str:
        """Human-readable duration, e.g. "0m", "45m", "2h" or "1h 5m"."""
        hours, remaining = divmod(self.minutes, MINUTES_PER_HOUR)
        if hours == 0:
            return f"{remaining}m"
        if remaining == 0:
            return f"{hours}h"
        return f"{hours}h {remaining}m"

    def __str__(self) -> str:
        return str(self.minutes)
