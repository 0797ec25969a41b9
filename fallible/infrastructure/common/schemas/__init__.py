"""Common schemas shared across contexts."""

from fallible.infrastructure.common.schemas.problem_details import ProblemDetails

__all__ = ["ProblemDetails"]
