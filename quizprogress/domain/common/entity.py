"""
Entity base.

An entity keeps its identity while its attributes change: a User who
completes a quiz is a new object with new progress but the same id, and the
two compare equal.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject

UNSAVED_ID = 0


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Integer identifier assigned by the database; UNSAVED_ID until then."""

    value: int

    def __post_init__(self) -> None:
        if self.value < UNSAVED_ID:
            raise ValueError(f"{type(self).__name__} cannot be negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder for an entity that has not been persisted yet."""
        return cls(UNSAVED_ID)

    @property
    def is_unsaved(self) -> bool:
        return self.value == UNSAVED_ID


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Compared and hashed by `id` alone. Subclasses use `@dataclass(eq=False)`."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self)) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
