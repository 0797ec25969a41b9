"""Application service for user accounts."""

import structlog

from fallible.application.common.result import Outcome, ValueOutcome
from fallible.application.identity.protocols.user_repository import UserRepositoryProtocol
from fallible.domain.common.errors import (
    BusinessRuleError,
    ConflictError,
    Error,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from fallible.domain.common.value_objects.ids import UserId
from fallible.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class UserService:
    """
    Application service for user account operations.

    Every operation returns an outcome; expected failures are never raised.
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize service with a user repository."""
        self.user_repository = user_repository

    def create_user(self, email: str, name: str) -> ValueOutcome[User]:
        """
        Validate the input and store a new user.

        Args:
            email: User's email address
            name: User's display name

        Returns:
            The saved user, one ValidationError per violated rule, or a
            ConflictError if the email is already taken
        """
        outcome = self._store_new_user(email, name)
        outcome.on_success(
            lambda user: logger.info("user_created", user_id=user.id.value, email=user.email)
        )
        return outcome

    def register_user(self, email: str, name: str) -> ValueOutcome[User]:
        """
        Register a new user, refusing emails that are already taken.

        Returns:
            The saved user, validation errors, or a ConflictError
        """
        outcome = self._store_new_user(email, name)
        outcome.on_success(
            lambda user: logger.info("user_registered", user_id=user.id.value, email=user.email)
        )
        outcome.on_failure(lambda errors: self._log_rejection("user_registration_rejected", errors))
        return outcome

    def get_user_by_id(self, user_id: int) -> ValueOutcome[User]:
        """Look up a user, failing with NotFoundError if there is none."""
        # UserId rejects negative values
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id >= 0 else None
        if user is None:
            return ValueOutcome.failure(NotFoundError("User", user_id))
        return ValueOutcome.success(user)

    def require_active(self, user: User) -> ValueOutcome[User]:
        """Pass active users through; inactive ones fail with ForbiddenError."""
        if not user.is_active:
            return ValueOutcome.failure(ForbiddenError())
        return ValueOutcome.success(user)

    def get_active_user(self, user_id: int) -> ValueOutcome[User]:
        """Look up a user that is allowed to act."""
        return self.get_user_by_id(user_id).bind(self.require_active)

    def deactivate_user(self, user_id: int) -> Outcome:
        """
        Deactivate a user account.

        Returns:
            Success, NotFoundError, or BusinessRuleError if already inactive
        """
        outcome = self.get_user_by_id(user_id).bind(self._deactivate).to_outcome()
        outcome.on_success(lambda: logger.info("user_deactivated", user_id=user_id))
        return outcome

    def validate(self, email: str, name: str) -> Outcome:
        """Check the registration input, collecting one error per violated rule."""
        errors: list[Error] = []

        if not email or not email.strip():
            errors.append(ValidationError("Email cannot be empty", ["Email field is required"]))
        elif "@" not in email:
            errors.append(ValidationError("Email is invalid", ["Email must contain '@'"]))

        if not name or not name.strip():
            errors.append(ValidationError("Name cannot be empty", ["Name field is required"]))

        if errors:
            return Outcome.failure(errors)
        return Outcome.success()

    def _store_new_user(self, email: str, name: str) -> ValueOutcome[User]:
        return (
            self.validate(email, name)
            .to_value_outcome(User.create(email=email, name=name))
            .bind(self._ensure_email_available)
            .map(self.user_repository.save)
        )

    def _ensure_email_available(self, user: User) -> ValueOutcome[User]:
        if self.user_repository.find_by_email(user.email) is not None:
            return ValueOutcome.failure(ConflictError("User with this email already exists"))
        return ValueOutcome.success(user)

    def _deactivate(self, user: User) -> ValueOutcome[User]:
        if not user.is_active:
            return ValueOutcome.failure(BusinessRuleError("User is already inactive"))
        user.deactivate()
        return ValueOutcome.success(self.user_repository.save(user))

    @staticmethod
    def _log_rejection(event: str, errors: tuple[Error, ...]) -> None:
        logger.info(event, codes=[error.code for error in errors])
