"""
Outcome types for use case results.

An outcome is either a success or a failure carrying one or more error
values. Expected failures (validation, not found, conflicts) are returned
as data instead of being raised, so callers compose fallible steps with
``map`` and ``bind`` rather than nested ``try``/``if`` blocks.

``Outcome`` is for operations without a return value, ``ValueOutcome[T]``
for operations that produce a ``T`` on success. Instances are frozen and
are only created through the ``success``/``failure`` classmethods.

Example:
    def create_user(email: str) -> ValueOutcome[User]:
        if not email.strip():
            return ValueOutcome.failure(
                ValidationError("Email cannot be empty", ["Email field is required"])
            )
        return ValueOutcome.success(User.create(email=email))

    # Usage
    create_user(email).map(to_response).on_success(print)
"""

from collections.abc import Callable, Iterable
from dataclasses import InitVar, dataclass
from typing import Generic, TypeVar, cast

import structlog
from pydantic import ValidationError as PydanticValidationError

from fallible.config import get_settings
from fallible.domain.common.errors import Error
from fallible.domain.common.exceptions import InvariantViolationError

T = TypeVar("T")  # Success value type
U = TypeVar("U")  # Mapped value type

logger = structlog.get_logger(__name__)

# Only the factory classmethods below hold this key.
_CONSTRUCTION_KEY = object()

ErrorsAction = Callable[[tuple[Error, ...]], None]


def _verbose_diagnostics() -> bool:
    # Only the wording depends on configuration
    try:
        return get_settings().verbose_diagnostics
    except PydanticValidationError:
        logger.warning("diagnostic_settings_invalid")
        return False


def _failure_requires_errors(subject: str) -> str:
    if _verbose_diagnostics():
        return (
            f"A failed {subject} must contain at least one error. "
            f"Check the arguments passed to {subject}.failure()."
        )
    return (
        "A failed outcome must contain at least one error. "
        "This indicates a bug in the calling code."
    )


def _collect_errors(errors: Error | Iterable[Error] | None) -> tuple[Error, ...]:
    """Normalize the argument of ``failure`` to an ordered tuple of errors."""
    if errors is None:
        return ()
    if isinstance(errors, type):
        raise TypeError(f"Expected an error value, got the class {errors.__name__}")
    if isinstance(errors, Error):
        return (errors,)
    collected = tuple(errors)
    for error in collected:
        # Error classes satisfy the protocol structurally but are not error values
        if isinstance(error, type) or not isinstance(error, Error):
            raise TypeError(f"Expected an error value, got {type(error).__name__}")
    return collected


def _check_invariant(subject: str, key: object, succeeded: bool, errors: tuple[Error, ...]) -> None:
    """Single choke point for outcome construction."""
    if key is not _CONSTRUCTION_KEY:
        raise TypeError(f"Use {subject}.success() or {subject}.failure() to create a {subject}")
    if succeeded and errors:
        raise InvariantViolationError(subject, f"A successful {subject} cannot carry errors")
    if not succeeded and not errors:
        logger.error("failure_without_errors", subject=subject)
        raise InvariantViolationError(subject, _failure_requires_errors(subject))


class _OutcomeMixin:
    """Behaviour shared by both outcome forms."""

    succeeded: bool
    errors: tuple[Error, ...]

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @property
    def first_error(self) -> Error | None:
        """The error a caller should report first, or None on success."""
        return self.errors[0] if self.errors else None

    def on_failure(self, action: ErrorsAction) -> None:
        """Call ``action`` with the errors if this is a failure. Terminal."""
        if not self.succeeded:
            action(self.errors)


@dataclass(frozen=True)
class Outcome(_OutcomeMixin):
    """Result of an operation that returns nothing on success."""

    succeeded: bool
    errors: tuple[Error, ...]
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        _check_invariant("Outcome", _key, self.succeeded, self.errors)

    @classmethod
    def success(cls) -> "Outcome":
        return cls(True, (), _CONSTRUCTION_KEY)

    @classmethod
    def failure(cls, errors: Error | Iterable[Error] | None) -> "Outcome":
        """
        Create a failed outcome from one error or an ordered sequence of errors.

        Raises:
            InvariantViolationError: If no error is given
        """
        return cls(False, _collect_errors(errors), _CONSTRUCTION_KEY)

    def on_success(self, action: Callable[[], None]) -> None:
        """Call ``action`` if this is a success. Terminal."""
        if self.succeeded:
            action()

    def to_value_outcome(self, value: T) -> "ValueOutcome[T]":
        """Continue a value-carrying chain after an operation without a value."""
        if self.succeeded:
            return ValueOutcome.success(value)
        return ValueOutcome.failure(self.errors)


@dataclass(frozen=True)
class ValueOutcome(_OutcomeMixin, Generic[T]):
    """
    Result of an operation that produces a value on success.

    ``value`` is None on failure and must not be read unless ``succeeded``.
    """

    succeeded: bool
    value: T | None
    errors: tuple[Error, ...]
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        _check_invariant("ValueOutcome", _key, self.succeeded, self.errors)

    @classmethod
    def success(cls, value: T) -> "ValueOutcome[T]":
        return cls(True, value, (), _CONSTRUCTION_KEY)

    @classmethod
    def failure(cls, errors: Error | Iterable[Error] | None) -> "ValueOutcome[T]":
        """
        Create a failed outcome from one error or an ordered sequence of errors.

        Raises:
            InvariantViolationError: If no error is given
        """
        return cls(False, None, _collect_errors(errors), _CONSTRUCTION_KEY)

    def on_success(self, action: Callable[[T], None]) -> None:
        """Call ``action`` with the value if this is a success. Terminal."""
        if self.succeeded:
            action(cast(T, self.value))

    def map(self, transform: Callable[[T], U]) -> "ValueOutcome[U]":
        """Apply ``transform`` to the value; failures pass through untouched."""
        if self.succeeded:
            return ValueOutcome.success(transform(cast(T, self.value)))
        return ValueOutcome.failure(self.errors)

    def bind(self, transform: Callable[[T], "ValueOutcome[U]"]) -> "ValueOutcome[U]":
        """Chain a step that can fail itself; failures pass through untouched."""
        if self.succeeded:
            return transform(cast(T, self.value))
        return ValueOutcome.failure(self.errors)

    def to_outcome(self) -> Outcome:
        """Drop the value, keeping only success or the errors."""
        if self.succeeded:
            return Outcome.success()
        return Outcome.failure(self.errors)

    def value_or(self, default: T) -> T:
        """Get the value, or ``default`` for a failure."""
        if self.succeeded:
            return cast(T, self.value)
        return default
