"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
vocabulary rules are violated or entity invariants are broken.
They are translated to error responses by the infrastructure layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: a morpheme id containing a path separator, an option index
    outside the question's options.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """
    Raised when an entity invariant is violated.

    Example: a memory table row carrying both a prefix and a suffix.
    """

    def __init__(self, entity: str, invariant: str) -> None:
        message = f"Invariant violation in {entity}: {invariant}"
        super().__init__(message, {"entity": entity, "invariant": invariant})
        self.entity = entity
        self.invariant = invariant
