"""Use case for registering a user with fresh progress."""

import structlog

from quizprogress.application.progress.protocols.user_repository import UserRepositoryProtocol
from quizprogress.domain.common.clock import Clock
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        clock: Clock,
        experience_cap: int,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.clock = clock
        self.experience_cap = experience_cap

    def register_user(self, email: str, username: str) -> User:
        """
        Register a new user starting at level 1 with no activity.

        Args:
            email: User's email address
            username: User's display name

        Returns:
            Persisted user entity

        Raises:
            EmailAlreadyExistsError: If email is already registered
            UsernameAlreadyExistsError: If username is already taken
            ValidationError: If email or username is invalid
        """
        user = User.create(email, username, self.clock, self.experience_cap)

        if self.user_repository.email_exists(user.email):
            raise EmailAlreadyExistsError(user.email)
        if self.user_repository.username_exists(user.username):
            raise UsernameAlreadyExistsError(user.username)

        user = self.user_repository.save(user)

        logger.info("user_registered", user_id=user.id.value)

        return user
