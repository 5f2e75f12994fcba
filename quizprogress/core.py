from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from quizprogress.application.progress.use_cases import (
    CompleteQuizUseCase,
    GetUserProgressUseCase,
    RegisterUserUseCase,
)
from quizprogress.config import get_settings
from quizprogress.infrastructure.common.clock import SystemClock
from quizprogress.infrastructure.progress.repositories.user_repository import UserRepository


def _experience_cap() -> int:
    return get_settings().MAX_EXPERIENCE_CAP


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Infrastructure services
    clock = providers.Singleton(SystemClock)
    experience_cap = providers.Callable(_experience_cap)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db, experience_cap=experience_cap)

    # Progress module, application use cases
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        clock=clock,
        experience_cap=experience_cap,
    )
    complete_quiz_use_case = providers.Factory(
        CompleteQuizUseCase,
        user_repository=user_repository,
        clock=clock,
    )
    get_user_progress_use_case = providers.Factory(
        GetUserProgressUseCase,
        user_repository=user_repository,
    )


container = Container()
