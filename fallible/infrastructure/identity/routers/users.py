from fastapi import APIRouter, Depends, Response, status

from fallible.application.identity.services.user_service import UserService
from fallible.core import container
from fallible.infrastructure.common.di import inject_service
from fallible.infrastructure.common.responses import to_response
from fallible.infrastructure.common.schemas import ProblemDetails
from fallible.infrastructure.identity.schemas import UserRegisterRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Depends(inject_service(container.user_service))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        status.HTTP_409_CONFLICT: {"model": ProblemDetails},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ProblemDetails},
    },
)
async def register_user(
    register_data: UserRegisterRequest, service: UserService = UserServiceDep
) -> Response:
    """
    Register a new user account.

    Fails with 422 for invalid input and 409 if the email is already taken.
    """
    outcome = service.register_user(register_data.email, register_data.name)
    return to_response(outcome.map(UserResponse.from_entity), status_code=status.HTTP_201_CREATED)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ProblemDetails}},
)
async def get_user(user_id: int, service: UserService = UserServiceDep) -> Response:
    """Get a user by id."""
    return to_response(service.get_user_by_id(user_id).map(UserResponse.from_entity))


@router.get(
    "/{user_id}/active",
    response_model=UserResponse,
    responses={
        status.HTTP_403_FORBIDDEN: {"model": ProblemDetails},
        status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
    },
)
async def get_active_user(user_id: int, service: UserService = UserServiceDep) -> Response:
    """Get a user by id, refusing inactive accounts."""
    return to_response(service.get_active_user(user_id).map(UserResponse.from_entity))


@router.post(
    "/{user_id}/deactivate",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
        status.HTTP_404_NOT_FOUND: {"model": ProblemDetails},
    },
)
async def deactivate_user(user_id: int, service: UserService = UserServiceDep) -> Response:
    """Deactivate a user account."""
    return to_response(service.deactivate_user(user_id), status_code=status.HTTP_204_NO_CONTENT)
