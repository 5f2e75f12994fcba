"""
Success/Failure result for operations that can reject their input.

Factories such as `StudyTime.create` return one of the two instead of
raising, so every caller has to look at the outcome:

    result = StudyTime.create(minutes)
    if isinstance(result, Failure):
        return result
    study_time = result.value
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried exception, or ValueError when the error is not one."""
        if isinstance(self.error, Exception):
            raise self.error
        raise ValueError(f"Cannot get value from Failure result: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error


Result = Success[T] | Failure[E]
