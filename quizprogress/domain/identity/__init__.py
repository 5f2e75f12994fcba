"""Identity domain layer."""

from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UsernameAlreadyExistsError",
]
