"""Tests for the QuizResult value object."""

import pytest

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.progress.value_objects import QuizResult


class TestQuizResult:
    def test_create_valid(self) -> None:
        result = QuizResult.create(8, 10, "CCNA", 15).unwrap()
        assert result.incorrect_answers == 2
        assert not result.is_perfect_score

    def test_perfect_score(self) -> None:
        assert QuizResult(10, 10, "CCNA", 0).is_perfect_score

    def test_empty_quiz_is_not_perfect(self) -> None:
        assert not QuizResult(0, 0, "CCNA", 0).is_perfect_score

    def test_correct_above_total_fails(self) -> None:
        result = QuizResult.create(11, 10, "CCNA", 0)
        assert result.is_failure
        assert result.unwrap_error().message == "Correct answers cannot exceed total questions"

    @pytest.mark.parametrize("category", ["", "   "])
    def test_blank_category_fails(self, category: str) -> None:
        result = QuizResult.create(1, 1, category, 0)
        assert result.unwrap_error().field == "category"

    @pytest.mark.parametrize(
        ("correct", "total", "minutes", "field"),
        [
            (-1, 5, 0, "correct_answers"),
            (1, -5, 0, "total_questions"),
            (1, 5, -3, "study_time_minutes"),
        ],
    )
    def test_negative_counts_fail(self, correct: int, total: int, minutes: int, field: str) -> None:
        result = QuizResult.create(correct, total, "CCNA", minutes)
        assert result.unwrap_error().field == field

    def test_direct_construction_raises(self) -> None:
        with pytest.raises(ValidationError):
            QuizResult(3, 2, "CCNA", 0)
