"""Building blocks shared by every domain module."""

from .clock import Clock
from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from .result import Failure, Result, Success
from .value_object import ValueObject, is_whole_number

__all__ = [
    "Clock",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "Failure",
    "InvariantViolationError",
    "Result",
    "Success",
    "ValidationError",
    "ValueObject",
    "is_whole_number",
]
