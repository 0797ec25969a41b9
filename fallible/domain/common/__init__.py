"""
Domain common module.

Contains the shared building blocks:
- Error values carried by failed outcomes
- Entity and EntityId base classes
- Exceptions signalling defects in calling code
"""

from .entity import Entity, EntityId
from .errors import (
    BusinessRuleError,
    ConflictError,
    DetailedError,
    Error,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from .exceptions import DomainError, InvariantViolationError

__all__ = [
    "BusinessRuleError",
    "ConflictError",
    "DetailedError",
    "DomainError",
    "Entity",
    "EntityId",
    "Error",
    "ForbiddenError",
    "InvariantViolationError",
    "NotFoundError",
    "ValidationError",
]
