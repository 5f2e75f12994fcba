from quizprogress.application.progress.protocols.user_repository import UserRepositoryProtocol
from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.identity.exceptions import UserNotFoundError


class GetUserProgressUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user together with their progress.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
