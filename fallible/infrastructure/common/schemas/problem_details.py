"""Problem details (RFC 7807) response schema."""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Body returned for a failed outcome."""

    status: int
    title: str = Field(..., description="Stable error code, e.g. 'NotFound'")
    detail: str = Field(..., description="Human-readable error message")
    errors: list[str] | None = Field(
        None, description="Individual rule violations, for validation errors"
    )
