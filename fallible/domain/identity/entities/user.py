"""User entity for identity management."""

from dataclasses import dataclass

from fallible.domain.common.entity import Entity
from fallible.domain.common.value_objects.ids import UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a registered account.

    Business Rules:
    - Email must be unique (checked by the registration service)
    - Email is stored trimmed and lower-cased
    - Only active users may use protected operations
    """

    id: UserId
    email: str
    name: str
    is_active: bool = True

    def deactivate(self) -> None:
        """Mark the user as inactive."""
        self.is_active = False

    @classmethod
    def create(cls, email: str, name: str) -> "User":
        """
        Create a new user.

        Args:
            email: User's email address (normalized here)
            name: User's display name

        Returns:
            New User instance with a placeholder id, set on save
        """
        return cls(id=UserId(0), email=email.strip().lower(), name=name.strip())
