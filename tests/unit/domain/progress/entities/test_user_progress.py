"""Tests for the UserProgress aggregate."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import pytest

from quizprogress.domain.common.exceptions import InvariantViolationError
from quizprogress.domain.progress.entities.user_progress import UserProgress, days_between
from quizprogress.domain.progress.value_objects import CategoryStat, QuizResult, Streak


def _row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "level": 2,
        "experience": 150,
        "total_questions": 20,
        "correct_answers": 16,
        "accuracy": "80.00",
        "study_time_minutes": 45,
        "current_streak": 3,
        "last_study_date": datetime(2026, 1, 4, 18, 0, tzinfo=UTC),
        "category_stats": {
            "version": 1,
            "categories": {"CCNA": {"correct": 16, "total": 20, "accuracy": 80.0}},
        },
        "updated_at": datetime(2026, 1, 4, 18, 0, tzinfo=UTC),
    }
    row.update(overrides)
    return row


class TestUserProgressCreate:
    def test_new_progress_has_defaults(self, clock) -> None:
        progress = UserProgress.create(clock)
        assert progress.level.value == 1
        assert progress.experience.value == 0
        assert progress.total_questions == 0
        assert progress.correct_answers == 0
        assert progress.accuracy.value == 0.0
        assert progress.study_time.minutes == 0
        assert progress.current_streak.days == 0
        assert progress.last_study_date is None
        assert progress.category_stats.get_all_categories() == []
        assert progress.updated_at == clock.now()

    def test_correct_above_total_is_rejected(self, clock) -> None:
        progress = UserProgress.create(clock)
        with pytest.raises(InvariantViolationError, match=r"correct_answers \(100\) cannot exceed"):
            replace(progress, total_questions=50, correct_answers=100)

    def test_negative_counts_are_rejected(self, clock) -> None:
        with pytest.raises(InvariantViolationError):
            replace(UserProgress.create(clock), total_questions=-1)


class TestUserProgressFromPersistence:
    def test_valid_row(self) -> None:
        progress = UserProgress.from_persistence(_row()).unwrap()
        assert progress.level.value == 2
        assert progress.experience.value == 150
        assert progress.accuracy.value == 80.0
        assert progress.current_streak.days == 3
        assert progress.category_stats.get_category_stats("CCNA") == CategoryStat(16, 20, 80.0)

    def test_round_trip(self) -> None:
        row = _row()
        progress = UserProgress.from_persistence(row).unwrap()
        assert progress.to_persistence() == row

    def test_round_trip_after_quiz(self, clock) -> None:
        progress = UserProgress.create(clock).add_quiz_result(
            QuizResult(2, 3, "Math", 7), clock
        )
        restored = UserProgress.from_persistence(progress.to_persistence()).unwrap()
        assert restored == progress
        assert restored.to_persistence()["accuracy"] == "66.67"

    @pytest.mark.parametrize("accuracy", ["abc", "NaN", "Infinity"])
    def test_unparseable_accuracy(self, accuracy: str) -> None:
        result = UserProgress.from_persistence(_row(accuracy=accuracy))
        assert result.is_failure
        assert result.unwrap_error().message == f"Invalid accuracy value in database: {accuracy}"

    def test_out_of_range_accuracy(self) -> None:
        result = UserProgress.from_persistence(_row(accuracy="100.50"))
        assert result.unwrap_error().field == "accuracy"

    def test_correct_above_total(self) -> None:
        result = UserProgress.from_persistence(_row(total_questions=50, correct_answers=100))
        assert result.unwrap_error().message == (
            "Invalid progress data: correct_answers (100) cannot exceed total_questions (50)"
        )

    def test_negative_count(self) -> None:
        result = UserProgress.from_persistence(_row(total_questions=-1, correct_answers=0))
        assert result.unwrap_error().field == "total_questions"

    @pytest.mark.parametrize(
        ("field", "value"),
        [("level", 0), ("experience", -5), ("study_time_minutes", -1), ("current_streak", -2)],
    )
    def test_invalid_value_object_fields(self, field: str, value: int) -> None:
        assert UserProgress.from_persistence(_row(**{field: value})).is_failure

    def test_experience_above_configured_cap(self) -> None:
        assert UserProgress.from_persistence(_row(experience=150), experience_cap=100).is_failure

    def test_corrupted_category_stats(self) -> None:
        result = UserProgress.from_persistence(_row(category_stats={"version": 1}))
        assert result.unwrap_error().message == "Categories must be an object"


class TestAddQuizResult:
    def test_perfect_score_earns_bonus(self, clock) -> None:
        progress = UserProgress.create(clock).add_quiz_result(
            QuizResult(10, 10, "CCNA", 20), clock
        )
        assert progress.experience.value == 105
        assert progress.level.value == 2

    def test_partial_score(self, clock) -> None:
        progress = UserProgress.create(clock).add_quiz_result(QuizResult(5, 10, "CCNA", 20), clock)
        assert progress.experience.value == 60
        assert progress.level.value == 1

    def test_totals_accuracy_and_study_time_accumulate(self, clock) -> None:
        progress = (
            UserProgress.create(clock)
            .add_quiz_result(QuizResult(8, 10, "CCNA", 15), clock)
            .add_quiz_result(QuizResult(6, 10, "CCNA", 30), clock)
        )
        assert progress.total_questions == 20
        assert progress.correct_answers == 14
        assert progress.accuracy.value == 70.0
        assert progress.study_time.minutes == 45
        assert progress.category_stats.get_category_stats("CCNA") == CategoryStat(14, 20, 70.0)

    def test_categories_are_tracked_separately(self, clock) -> None:
        progress = (
            UserProgress.create(clock)
            .add_quiz_result(QuizResult(8, 10, "CCNA", 0), clock)
            .add_quiz_result(QuizResult(1, 4, "Security+", 0), clock)
        )
        assert progress.category_stats.get_all_categories() == ["CCNA", "Security+"]
        assert progress.category_stats.get_category_stats("Security+") == CategoryStat(1, 4, 25.0)

    def test_quiz_in_over_total_category(self, clock) -> None:
        stored = _row(
            category_stats={
                "version": 1,
                "categories": {"CCNA": {"correct": 12, "total": 10, "accuracy": 100}},
            }
        )
        progress = UserProgress.from_persistence(stored).unwrap()

        progress = progress.add_quiz_result(QuizResult(5, 5, "CCNA", 0), clock)

        assert progress.category_stats.get_category_stats("CCNA") == CategoryStat(17, 15, 100.0)
        assert progress.accuracy.value == 84.0
        assert UserProgress.from_persistence(progress.to_persistence()).is_success

    def test_experience_is_capped(self, clock) -> None:
        progress = UserProgress.create(clock, experience_cap=100).add_quiz_result(
            QuizResult(10, 10, "CCNA", 0), clock
        )
        assert progress.experience.value == 100
        assert progress.level.value == 2

    def test_original_is_untouched(self, clock) -> None:
        progress = UserProgress.create(clock)
        progress.add_quiz_result(QuizResult(10, 10, "CCNA", 20), clock)
        assert progress.experience.value == 0
        assert progress.total_questions == 0
        assert progress.last_study_date is None

    def test_timestamps_follow_the_clock(self, clock) -> None:
        progress = UserProgress.create(clock)
        clock.advance(hours=2)
        progress = progress.add_quiz_result(QuizResult(1, 1, "CCNA", 0), clock)
        assert progress.updated_at == clock.now()
        assert progress.last_study_date == clock.now()

    def test_empty_quiz_still_counts_as_study(self, clock) -> None:
        progress = UserProgress.create(clock).add_quiz_result(QuizResult(0, 0, "CCNA", 5), clock)
        assert progress.experience.value == 0
        assert progress.accuracy.value == 0.0
        assert progress.current_streak.days == 1


class TestStreak:
    def test_streak_scenario(self, clock) -> None:
        result = QuizResult(5, 10, "CCNA", 10)
        progress = UserProgress.create(clock).add_quiz_result(result, clock)
        assert progress.current_streak.days == 1

        clock.advance(days=1)
        progress = progress.add_quiz_result(result, clock)
        assert progress.current_streak.days == 2

        clock.advance(days=3)
        progress = progress.add_quiz_result(result, clock)
        assert progress.current_streak.days == 1

    def test_same_day_keeps_streak(self, clock) -> None:
        result = QuizResult(5, 10, "CCNA", 10)
        progress = UserProgress.create(clock).add_quiz_result(result, clock)
        clock.advance(days=1)
        progress = progress.add_quiz_result(result, clock)
        clock.advance(hours=3)
        progress = progress.add_quiz_result(result, clock)
        assert progress.current_streak.days == 2

    def test_same_day_with_inactive_streak_starts_at_one(self, clock) -> None:
        progress = UserProgress.from_persistence(
            _row(current_streak=0, last_study_date=clock.now() - timedelta(hours=1))
        ).unwrap()
        assert progress.update_streak(clock).current_streak.days == 1

    def test_calendar_day_not_24_hours(self, clock) -> None:
        clock.current = datetime(2026, 1, 5, 23, 30, tzinfo=UTC)
        result = QuizResult(1, 1, "CCNA", 0)
        progress = UserProgress.create(clock).add_quiz_result(result, clock)
        clock.advance(hours=1)
        assert progress.add_quiz_result(result, clock).current_streak.days == 2

    def test_backward_clock_counts_like_forward(self, clock) -> None:
        # Day differences are absolute, so a clock moved back by a day still extends the streak
        result = QuizResult(1, 1, "CCNA", 0)
        progress = UserProgress.create(clock).add_quiz_result(result, clock)
        clock.advance(days=-1)
        assert progress.add_quiz_result(result, clock).current_streak.days == 2

    def test_update_streak_sets_study_date(self, clock) -> None:
        progress = UserProgress.create(clock).update_streak(clock)
        assert progress.current_streak == Streak(1)
        assert progress.last_study_date == clock.now()


class TestLevelAndExperience:
    def test_calculate_level_is_idempotent(self) -> None:
        progress = UserProgress.from_persistence(_row(level=1, experience=250)).unwrap()
        once = progress.calculate_level()
        assert once.level.value == 3
        assert once.calculate_level() == once

    @pytest.mark.parametrize(
        ("correct", "total", "expected"),
        [(10, 10, 105), (5, 10, 60), (0, 4, 8), (3, 3, 31), (0, 0, 0)],
    )
    def test_calculate_experience_gain(self, correct: int, total: int, expected: int) -> None:
        result = QuizResult(correct, total, "CCNA", 0)
        assert UserProgress.calculate_experience_gain(result) == expected


class TestDaysBetween:
    def test_same_day(self) -> None:
        morning = datetime(2026, 1, 5, 1, tzinfo=UTC)
        night = datetime(2026, 1, 5, 23, tzinfo=UTC)
        assert days_between(morning, night) == 0

    def test_is_absolute(self) -> None:
        later = datetime(2026, 1, 8, tzinfo=UTC)
        earlier = datetime(2026, 1, 5, tzinfo=UTC)
        assert days_between(later, earlier) == 3

    def test_compares_dates_in_the_later_timezone(self) -> None:
        earlier = datetime(2026, 1, 5, 10, 0, tzinfo=UTC)
        # 2026-01-05 23:00 UTC is already 2026-01-06 at UTC+2
        later = datetime(2026, 1, 6, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert days_between(earlier, later) == 1
