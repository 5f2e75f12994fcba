"""FastAPI glue for the dependency injection container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from quizprogress.core import container
from quizprogress.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Build a FastAPI dependency that resolves a use case from the container.

    The request's session is bound to ``container.db`` only while the use case
    and its repositories are being constructed.
    """

    def resolve(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return resolve
