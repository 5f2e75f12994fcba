"""SQLAlchemy repository for users and their progress rows."""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)
from quizprogress.domain.progress.value_objects import DEFAULT_MAX_EXPERIENCE
from quizprogress.infrastructure.progress.mappers.user_mapper import UserMapper
from quizprogress.models import User as UserORM

logger = logging.getLogger(__name__)


def _select_user(user_id: int) -> Select[tuple[UserORM]]:
    # selectinload keeps the progress query separate, so FOR UPDATE never
    # applies to an outer join (PostgreSQL rejects that)
    return select(UserORM).options(selectinload(UserORM.progress)).where(UserORM.id == user_id)


class UserRepository:
    def __init__(self, db: Session, experience_cap: int = DEFAULT_MAX_EXPERIENCE) -> None:
        self.db = db
        self.mapper = UserMapper(experience_cap)

    def find_by_id(self, user_id: UserId, for_update: bool = False) -> User | None:
        """
        Load a user with their progress.

        With `for_update` the user row stays locked until the session commits,
        which serializes concurrent quiz completions for the same user.

        Raises:
            CorruptedProgressError: If the stored progress row is invalid
        """
        stmt = _select_user(user_id.value)
        if for_update:
            stmt = stmt.with_for_update()
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def email_exists(self, email: str) -> bool:
        stmt = select(UserORM.id).where(UserORM.email == email)
        return self.db.execute(stmt).first() is not None

    def username_exists(self, username: str) -> bool:
        stmt = select(UserORM.id).where(UserORM.username == username)
        return self.db.execute(stmt).first() is not None

    def save(self, user: User) -> User:
        """
        Insert a new user or write back an existing user's progress, then commit.

        Raises:
            EmailAlreadyExistsError: A new user's email is taken
            UsernameAlreadyExistsError: A new user's username is taken
        """
        if user.id.is_unsaved:
            return self._insert(user)

        orm_model = self.db.execute(_select_user(user.id.value)).scalar_one_or_none()
        if not orm_model:
            raise ValueError(f"User with id {user.id.value} not found")

        self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated progress for user {user.id.value}")
        return self.mapper.to_domain(orm_model)

    def _insert(self, user: User) -> User:
        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # The unique constraint names the offending column
            violated = str(e.orig)
            if "email" in violated:
                raise EmailAlreadyExistsError(user.email) from e
            if "username" in violated:
                raise UsernameAlreadyExistsError(user.username) from e
            raise

        self.db.refresh(orm_model)
        logger.info(f"Created user {user.username} (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)
