"""
Errors raised by the domain layer.

`ValidationError` normally travels inside a `Failure`; it is raised only when
an object is constructed directly with bad data. The remaining errors are
raised and turned into HTTP responses at the edge of the application.
"""


class DomainError(Exception):
    """Root of every error the domain can produce."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} - {self.details}"


class ValidationError(DomainError):
    """A value was rejected, e.g. a negative streak or accuracy above 100."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)


class EntityNotFoundError(DomainError):
    """No entity of `entity_type` exists under `entity_id`."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class InvariantViolationError(DomainError):
    """
    An aggregate would end up in a state its rules forbid.

    UserProgress raises this when correct answers would exceed total
    questions, or when an accumulated value can no longer be represented.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        self.aggregate = aggregate
        self.invariant = invariant
        super().__init__(
            f"Invariant violation in {aggregate}: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
