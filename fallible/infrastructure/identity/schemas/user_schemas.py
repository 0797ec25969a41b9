"""Pydantic schemas for user API requests and responses."""

from pydantic import BaseModel, Field

from fallible.domain.identity.entities.user import User


class UserRegisterRequest(BaseModel):
    """Request body for registering a user.

    Fields are plain strings; content rules are checked by the service so
    that violations come back as validation errors in problem details form.
    """

    email: str = Field("", description="User's email address")
    name: str = Field("", description="User's display name")


class UserResponse(BaseModel):
    """User details returned by the API."""

    id: int
    email: str
    name: str
    is_active: bool

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id.value, email=user.email, name=user.name, is_active=user.is_active)
