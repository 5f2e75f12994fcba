from typing import Protocol

from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId, for_update: bool = False) -> User | None: ...

    def email_exists(self, email: str) -> bool: ...

    def username_exists(self, username: str) -> bool: ...

    def save(self, user: User) -> User: ...
