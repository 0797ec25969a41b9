"""Identity domain layer."""

from fallible.domain.identity.entities.user import User

__all__ = ["User"]
