"""Value objects shared across bounded contexts."""

from .ids import UserId

__all__ = ["UserId"]
