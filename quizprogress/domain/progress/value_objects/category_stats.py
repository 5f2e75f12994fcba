"""
CategoryStats value object.

Per-category performance statistics stored as a versioned JSON document:

    {"version": 1, "categories": {"CCNA": {"correct": 8, "total": 10, "accuracy": 80.0}}}

The key set only ever grows; an existing entry is replaced as a whole
whenever it changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from quizprogress.domain.common.exceptions import ValidationError
from quizprogress.domain.common.result import Failure, Result, Success
from quizprogress.domain.common.value_object import is_whole_number
from quizprogress.domain.progress.value_objects.accuracy import (
    MAX_ACCURACY,
    MIN_ACCURACY,
    percentage,
)

if TYPE_CHECKING:
    from typing import Self

CURRENT_VERSION = 1


@dataclass(frozen=True)
class CategoryStat:
    """Running totals for a single category."""

    correct: int
    total: int
    accuracy: float

    def to_json(self) -> dict[str, int | float]:
        """Serialize to JSON-compatible dict."""
        return {"correct": self.correct, "total": self.total, "accuracy": self.accuracy}

    @classmethod
    def from_counts(cls, correct: int, total: int) -> Self:
        return cls(
            correct=correct,
            total=total,
            accuracy=percentage(correct, total),
        )


@dataclass(frozen=True)
class CategoryStats:
    """
    Keyed collection of per-category statistics.

    Business Rules:
    - Version must be a positive integer
    - Every category has non-negative correct/total and an accuracy in [0, 100]
    - correct <= total is not checked per category; the accuracy of such an
      entry is capped at 100 when it is next updated
    """

    version: int
    categories: Mapping[str, CategoryStat]

    def __post_init__(self) -> None:
        # Freeze the mapping so the value object cannot be mutated through it
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    def __hash__(self) -> int:
        return hash((self.version, tuple(sorted(self.categories.items()))))

    @classmethod
    def create_empty(cls) -> Self:
        return cls(version=CURRENT_VERSION, categories={})

    @classmethod
    def create(cls, data: object) -> Result[Self, ValidationError]:
        """
        Validate and build CategoryStats from an untyped payload.

        Used when restoring from storage, where the payload is whatever the
        JSON column holds.

        Args:
            data: Decoded JSON document

        Returns:
            Success with CategoryStats, or Failure naming the offending category
        """
        if not isinstance(data, Mapping):
            return Failure(
                ValidationError("Category stats must be an object", field="category_stats")
            )

        version = data.get("version")
        if not is_whole_number(version) or version <= 0:
            return Failure(
                ValidationError(
                    "Category stats version must be positive", field="version", value=version
                )
            )

        raw_categories = data.get("categories")
        if not isinstance(raw_categories, Mapping):
            return Failure(ValidationError("Categories must be an object", field="categories"))

        categories: dict[str, CategoryStat] = {}
        for key, value in raw_categories.items():
            if not isinstance(value, Mapping):
                return Failure(
                    ValidationError(f"Invalid category stat for {key}", field="categories")
                )

            correct = value.get("correct")
            total = value.get("total")
            accuracy = value.get("accuracy")
            if (
                not is_whole_number(correct)
                or not is_whole_number(total)
                or isinstance(accuracy, bool)
                or not isinstance(accuracy, int | float)
            ):
                return Failure(
                    ValidationError(
                        f"Invalid stat properties for category {key}", field="categories"
                    )
                )

            if correct < 0 or total < 0 or not MIN_ACCURACY <= accuracy <= MAX_ACCURACY:
                return Failure(
                    ValidationError(
                        f"Invalid stat values for category {key}: values must be "
                        "non-negative and accuracy must be <= 100",
                        field="categories",
                    )
                )

            categories[str(key)] = CategoryStat(
                correct=correct, total=total, accuracy=float(accuracy)
            )

        return Success(cls(version=version, categories=categories))

    def update_category(self, category: str, correct: int, total: int) -> Self:
        """Replace the statistics of a category with the given totals."""
        categories = dict(self.categories)
        categories[category] = CategoryStat.from_counts(correct, total)
        return type(self)(version=self.version, categories=categories)

    def increment_category(self, category: str, is_correct: bool) -> Self:
        """Record a single answered question for a category."""
        return self.add_results(category, 1 if is_correct else 0, 1)

    def add_results(self, category: str, correct: int, total: int) -> Self:
        """Accumulate a quiz's answer counts onto a category's running totals."""
        existing = self.categories.get(category)
        current_correct = existing.correct if existing else 0
        current_total = existing.total if existing else 0
        return self.update_category(category, current_correct + correct, current_total + total)

    def get_category_stats(self, category: str) -> CategoryStat | None:
        return self.categories.get(category)

    def get_all_categories(self) -> list[str]:
        return list(self.categories)

    def to_json(self) -> dict[str, Any]:
        """Serialize to a plain nested dict for a JSON column."""
        return {
            "version": self.version,
            "categories": {name: stat.to_json() for name, stat in self.categories.items()},
        }
