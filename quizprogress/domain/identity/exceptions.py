"""Identity domain exceptions."""

from quizprogress.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email


class UsernameAlreadyExistsError(DomainError):
    """Raised when attempting to register with a username that is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username {username} is already taken", {"username": username})
        self.username = username
