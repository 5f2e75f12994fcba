"""User entity: identity plus embedded learning progress."""

import re
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Self

from quizprogress.domain.common.clock import Clock
from quizprogress.domain.common.entity import Entity
from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.progress.entities.user_progress import UserProgress
from quizprogress.domain.progress.value_objects import DEFAULT_MAX_EXPERIENCE, QuizResult

# Domain constraints
MAX_EMAIL_LENGTH = 100
MIN_USERNAME_LENGTH = 2
MAX_USERNAME_LENGTH = 50
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    A quiz taker and their current UserProgress snapshot.

    Business Rules:
    - Email and username are unique across users (checked by the repository)
    - Email is 1 to MAX_EMAIL_LENGTH characters
    - Username is 2-50 letters, digits, underscores or hyphens
    - Completing a quiz yields a new User; the current one is left untouched
    """

    id: UserId
    email: str
    username: str
    progress: UserProgress
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if not MIN_USERNAME_LENGTH <= len(self.username) <= MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username must be between {MIN_USERNAME_LENGTH} and "
                f"{MAX_USERNAME_LENGTH} characters",
                field="username",
                value=self.username,
            )
        if not USERNAME_PATTERN.match(self.username):
            raise ValidationError(
                "Username can only contain letters, numbers, underscores, and hyphens",
                field="username",
                value=self.username,
            )

    def complete_quiz(self, result: QuizResult, clock: Clock) -> Self:
        """
        Record a completed quiz.

        Args:
            result: Outcome of the quiz attempt
            clock: Source of the completion timestamp

        Returns:
            New User carrying the updated progress
        """
        return replace(
            self,
            progress=self.progress.add_quiz_result(result, clock),
            updated_at=clock.now(),
        )

    @classmethod
    def create(
        cls,
        email: str,
        username: str,
        clock: Clock,
        experience_cap: int = DEFAULT_MAX_EXPERIENCE,
    ) -> Self:
        """
        Create a new user with default progress.

        Args:
            email: User's email address
            username: Display name, whitespace is stripped
            clock: Source of the creation timestamp
            experience_cap: Maximum experience the user can accumulate

        Returns:
            New User instance (ID will be 0 until persisted)

        Raises:
            ValidationError: If email or username is invalid
        """
        now = clock.now()
        return cls(
            id=UserId.generate(),
            email=email.strip(),
            username=username.strip(),
            progress=UserProgress.create(clock, experience_cap),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        username: str,
        progress: UserProgress,
        created_at: datetime,
        updated_at: datetime,
    ) -> Self:
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            username=username,
            progress=progress,
            created_at=created_at,
            updated_at=updated_at,
        )
