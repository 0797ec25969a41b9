"""
Domain layer exceptions.

Expected failures (validation, missing entities, conflicts) are never raised:
they travel as error values inside a failed outcome. The exceptions here
signal defects in the calling code and are meant to surface loudly.
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


class InvariantViolationError(DomainError):
    """
    Raised when a type's construction invariant is broken.

    Example: building a failed outcome without a single error.
    """

    def __init__(self, subject: str, invariant: str) -> None:
        super().__init__(invariant, {"subject": subject})
        self.subject = subject
        self.invariant = invariant
