"""
Outcome to HTTP response conversion.

The outcome types know nothing about HTTP; this module is the only place
where error values become status codes.
"""

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from fallible.application.common.result import Outcome, ValueOutcome
from fallible.domain.common.errors import DetailedError, Error
from fallible.infrastructure.common.schemas.problem_details import ProblemDetails

PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_details(error: Error) -> ProblemDetails:
    """Describe a single error as a problem details body."""
    problem = ProblemDetails(status=error.status_code, title=error.code, detail=error.message)
    if isinstance(error, DetailedError):
        problem.errors = list(error.details)
    return problem


def to_response(
    outcome: Outcome | ValueOutcome[object], *, status_code: int = status.HTTP_200_OK
) -> Response:
    """
    Convert an outcome to a FastAPI response.

    Successes use ``status_code``; a ValueOutcome's value is JSON-encoded as
    the body. Failures are rendered from the first error only: its status
    code becomes the HTTP status, so several errors are never merged.
    """
    if outcome.succeeded:
        if isinstance(outcome, ValueOutcome):
            return JSONResponse(content=jsonable_encoder(outcome.value), status_code=status_code)
        return Response(status_code=status_code)

    # Failed outcomes always carry at least one error
    first_error = outcome.errors[0]
    problem = problem_details(first_error)
    return JSONResponse(
        content=problem.model_dump(exclude_none=True),
        status_code=first_error.status_code,
        media_type=PROBLEM_MEDIA_TYPE,
    )
