"""Tests for the Experience value object."""

import pytest

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.progress.value_objects import DEFAULT_MAX_EXPERIENCE, Experience


class TestExperienceCreation:
    def test_create_zero(self) -> None:
        assert Experience.create(0).unwrap().value == 0

    def test_create_at_cap(self) -> None:
        assert Experience.create(DEFAULT_MAX_EXPERIENCE).is_success

    @pytest.mark.parametrize("value", [-1, DEFAULT_MAX_EXPERIENCE + 1])
    def test_create_out_of_range_fails(self, value: int) -> None:
        assert Experience.create(value).is_failure

    def test_create_fractional_fails(self) -> None:
        result = Experience.create(1.5)  # type: ignore[arg-type]
        assert result.is_failure
        assert result.unwrap_error().field == "experience"

    def test_custom_cap(self) -> None:
        assert Experience.create(150, cap=100).is_failure
        assert Experience.create(100, cap=100).is_success

    def test_cap_does_not_affect_equality(self) -> None:
        assert Experience(5, cap=10) == Experience(5)


class TestExperienceAdd:
    def test_add_points(self) -> None:
        result = Experience(40).add(60)
        assert result.unwrap() == Experience(100)

    def test_add_zero_points(self) -> None:
        assert Experience(40).add(0).unwrap().value == 40

    def test_add_is_capped(self) -> None:
        result = Experience(DEFAULT_MAX_EXPERIENCE - 10).add(100)
        assert result.unwrap().value == DEFAULT_MAX_EXPERIENCE

    def test_add_respects_custom_cap(self) -> None:
        added = Experience(90, cap=100).add(50).unwrap()
        assert added.value == 100
        assert added.cap == 100

    def test_add_negative_points_fails(self) -> None:
        result = Experience(40).add(-5)
        assert result.is_failure
        error = result.unwrap_error()
        assert isinstance(error, ValidationError)
        assert error.message == "Cannot add negative experience"

    def test_add_does_not_mutate(self) -> None:
        experience = Experience(10)
        experience.add(10)
        assert experience.value == 10


class TestCalculatePoints:
    @pytest.mark.parametrize(
        ("is_correct", "difficulty", "expected"),
        [(True, 1, 10), (True, 2, 20), (True, 3, 30), (False, 1, 2), (False, 3, 6)],
    )
    def test_points_scale_with_difficulty(
        self, is_correct: bool, difficulty: int, expected: int
    ) -> None:
        assert Experience.calculate_points(is_correct, difficulty) == expected

    def test_unknown_difficulty_counts_as_easy(self) -> None:
        assert Experience.calculate_points(True, 7) == 10
        assert Experience.calculate_points(False, 0) == 2
