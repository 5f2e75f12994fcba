"""Mapper for User ORM ↔ Domain conversion."""

from datetime import UTC, datetime
from decimal import Decimal

from quizprogress.domain.common.result import Failure
from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.progress.entities.user_progress import UserProgress, UserProgressRow
from quizprogress.domain.progress.exceptions import CorruptedProgressError
from quizprogress.domain.progress.value_objects import DEFAULT_MAX_EXPERIENCE
from quizprogress.models import User as UserORM
from quizprogress.models import UserProgress as UserProgressORM


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo; stored values are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def __init__(self, experience_cap: int = DEFAULT_MAX_EXPERIENCE) -> None:
        self.experience_cap = experience_cap

    def to_domain(self, orm_model: UserORM) -> User:
        """
        Convert ORM model to domain entity.

        Raises:
            CorruptedProgressError: If the progress row is missing or fails validation
        """
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            username=orm_model.username,
            progress=self.progress_to_domain(orm_model.id, orm_model.progress),
            created_at=_as_utc(orm_model.created_at),
            updated_at=_as_utc(orm_model.updated_at),
        )

    def progress_to_domain(
        self, user_id: int, orm_model: UserProgressORM | None
    ) -> UserProgress:
        if orm_model is None:
            raise CorruptedProgressError(user_id, "missing progress row")
        row = UserProgressRow(
            level=orm_model.level,
            experience=orm_model.experience,
            total_questions=orm_model.total_questions,
            correct_answers=orm_model.correct_answers,
            accuracy=str(orm_model.accuracy),
            study_time_minutes=orm_model.study_time_minutes,
            current_streak=orm_model.current_streak,
            last_study_date=_as_utc(orm_model.last_study_date),
            category_stats=orm_model.category_stats,
            updated_at=_as_utc(orm_model.updated_at),
        )
        result = UserProgress.from_persistence(row, self.experience_cap)
        if isinstance(result, Failure):
            raise CorruptedProgressError(user_id, result.error.message)
        return result.value

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.email = domain_entity.email
            orm_model.username = domain_entity.username
            if domain_entity.updated_at is not None:
                orm_model.updated_at = domain_entity.updated_at
            self._apply_progress(domain_entity.progress, orm_model.progress)
            return orm_model

        # Create new
        progress_orm = UserProgressORM()
        self._apply_progress(domain_entity.progress, progress_orm)
        return UserORM(
            id=None if domain_entity.id.is_unsaved else domain_entity.id.value,
            email=domain_entity.email,
            username=domain_entity.username,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            progress=progress_orm,
        )

    @staticmethod
    def _apply_progress(progress: UserProgress, orm_model: UserProgressORM) -> None:
        row = progress.to_persistence()
        orm_model.level = row["level"]
        orm_model.experience = row["experience"]
        orm_model.total_questions = row["total_questions"]
        orm_model.correct_answers = row["correct_answers"]
        orm_model.accuracy = Decimal(row["accuracy"])
        orm_model.study_time_minutes = row["study_time_minutes"]
        orm_model.current_streak = row["current_streak"]
        orm_model.last_study_date = row["last_study_date"]
        orm_model.category_stats = row["category_stats"]
        orm_model.updated_at = row["updated_at"]
