from .complete_quiz_use_case import CompleteQuizUseCase
from .get_user_progress_use_case import GetUserProgressUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "CompleteQuizUseCase",
    "GetUserProgressUseCase",
    "RegisterUserUseCase",
]
