"""Tests for the User entity."""

import pytest

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.value_objects.ids import UserId
from quizprogress.domain.identity.entities.user import User
from quizprogress.domain.progress.value_objects import QuizResult


class TestUserCreate:
    def test_create_new_user(self, clock) -> None:
        user = User.create(" ada@example.com ", " ada_l ", clock)
        assert user.id == UserId(0)
        assert user.email == "ada@example.com"
        assert user.username == "ada_l"
        assert user.progress.level.value == 1
        assert user.created_at == clock.now()

    def test_experience_cap_reaches_progress(self, clock) -> None:
        user = User.create("ada@example.com", "ada", clock, experience_cap=50)
        assert user.progress.experience.cap == 50

    @pytest.mark.parametrize("username", ["a", "x" * 51, "has space", "bang!"])
    def test_invalid_username(self, clock, username: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            User.create("ada@example.com", username, clock)
        assert exc_info.value.field == "username"

    @pytest.mark.parametrize("email", ["", "   ", "a" * 95 + "@x.com"])
    def test_invalid_email(self, clock, email: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            User.create(email, "ada", clock)
        assert exc_info.value.field == "email"


class TestUserCompleteQuiz:
    def test_complete_quiz_returns_updated_user(self, clock) -> None:
        user = User.create("ada@example.com", "ada", clock)
        clock.advance(minutes=30)

        updated = user.complete_quiz(QuizResult(10, 10, "CCNA", 20), clock)

        assert updated.progress.experience.value == 105
        assert updated.progress.study_time.minutes == 20
        assert updated.updated_at == clock.now()
        assert updated.created_at == user.created_at

    def test_complete_quiz_leaves_original_untouched(self, clock) -> None:
        user = User.create("ada@example.com", "ada", clock)
        user.complete_quiz(QuizResult(10, 10, "CCNA", 20), clock)
        assert user.progress.experience.value == 0

    def test_identity_equality(self, clock) -> None:
        user = User.create("ada@example.com", "ada", clock)
        updated = user.complete_quiz(QuizResult(1, 1, "CCNA", 0), clock)
        assert user == updated
