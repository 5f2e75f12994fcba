"""Progress domain exceptions."""

from quizprogress.domain.common.exceptions import DomainError


class CorruptedProgressError(DomainError):
    """Raised when a stored progress row fails validation on restore."""

    def __init__(self, user_id: int, reason: str) -> None:
        super().__init__(
            f"Stored progress for user {user_id} is invalid: {reason}",
            {"user_id": user_id, "reason": reason},
        )
        self.user_id = user_id
        self.reason = reason
