"""Success-or-errors outcome types for composing fallible operations."""

from fallible.application.common.result import Outcome, ValueOutcome
from fallible.domain.common.errors import (
    BusinessRuleError,
    ConflictError,
    DetailedError,
    Error,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from fallible.domain.common.exceptions import InvariantViolationError

__all__ = [
    "BusinessRuleError",
    "ConflictError",
    "DetailedError",
    "Error",
    "ForbiddenError",
    "InvariantViolationError",
    "NotFoundError",
    "Outcome",
    "ValidationError",
    "ValueOutcome",
]
