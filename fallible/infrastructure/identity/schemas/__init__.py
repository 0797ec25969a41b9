"""Identity context schemas."""

from fallible.infrastructure.identity.schemas.user_schemas import (
    UserRegisterRequest,
    UserResponse,
)

__all__ = [
    "UserRegisterRequest",
    "UserResponse",
]
