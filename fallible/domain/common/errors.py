"""
Error values carried by failed outcomes.

Any object exposing ``message``, ``code`` and ``status_code`` is an error.
``code`` and ``status_code`` are constants of the error kind; ``message`` is
specific to the instance. The concrete variants below cover the common
cases, and host applications can add their own kinds without touching the
outcome types.

Example:
    @dataclass(frozen=True)
    class RateLimitedError:
        message: str
        code: ClassVar[str] = "RateLimited"
        status_code: ClassVar[int] = 429
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Error(Protocol):
    """Structural interface every error value satisfies."""

    @property
    def message(self) -> str: ...

    @property
    def code(self) -> str: ...

    @property
    def status_code(self) -> int: ...


@runtime_checkable
class DetailedError(Error, Protocol):
    """An error that also lists the individual rule violations."""

    @property
    def details(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class ValidationError:
    """
    Input violates a shape or content rule.

    Example: an empty email field, a malformed date.
    """

    message: str
    details: tuple[str, ...]

    code: ClassVar[str] = "ValidationFailed"
    status_code: ClassVar[int] = 422

    def __init__(self, message: str, details: Iterable[str] | None = None) -> None:
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "details", tuple(details or ()))


@dataclass(frozen=True)
class NotFoundError:
    """
    A lookup by identifier found nothing.

    Example: fetching user 999 that doesn't exist.
    """

    entity_name: str
    entity_id: object

    code: ClassVar[str] = "NotFound"
    status_code: ClassVar[int] = 404

    @property
    def message(self) -> str:
        return f"{self.entity_name} with id '{self.entity_id}' not found"


@dataclass(frozen=True)
class ForbiddenError:
    """The caller is not allowed to perform the action."""

    message: str = field(default="Access denied", init=False)

    code: ClassVar[str] = "Forbidden"
    status_code: ClassVar[int] = 403


@dataclass(frozen=True)
class BusinessRuleError:
    """
    A domain rule that is not a plain validation was violated.

    Example: trying to cancel an order that has already been paid.
    """

    message: str

    code: ClassVar[str] = "BusinessRuleViolation"
    status_code: ClassVar[int] = 400


@dataclass(frozen=True)
class ConflictError:
    """
    The requested state collides with existing state.

    Example: registering with an email that is already taken.
    """

    message: str

    code: ClassVar[str] = "Conflict"
    status_code: ClassVar[int] = 409
