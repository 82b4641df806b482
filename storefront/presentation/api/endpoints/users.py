"""User endpoints — CRUD over the safe projections plus demo login."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.application.schemas import (
    ApiResponse,
    AuthenticatedUser,
    AuthResponse,
    Credentials,
    UserCreate,
    UserResponse,
    UserSummary,
    UserUpdate,
)
from storefront.application.services import UserService
from storefront.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
)
from storefront.infrastructure.dependencies import get_user_service
from storefront.presentation.api.params import parse_active, parse_id, parse_limit

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=ApiResponse[list[UserSummary]],
    response_model_exclude_none=True,
)
async def list_users(
    role: str | None = Query(None, description="Case-insensitive role filter"),
    active: str | None = Query(None, description="'true' for active users, anything else for inactive"),
    limit: str | None = Query(None, description="Maximum number of users returned"),
    service: UserService = Depends(get_user_service),
) -> ApiResponse[list[UserSummary]]:
    """List users without their creation timestamp."""
    users, total = await service.list_users(
        role=role,
        active=parse_active(active),
        limit=parse_limit(limit),
    )
    return ApiResponse(
        data=[UserSummary.model_validate(u, from_attributes=True) for u in users],
        total=total,
    )


@router.post(
    "/authenticate",
    response_model=ApiResponse[AuthResponse],
    response_model_exclude_none=True,
)
async def authenticate(
    credentials: Credentials,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[AuthResponse]:
    """Exchange a username and password for an opaque session token."""
    try:
        user, token = await service.authenticate(credentials)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    return ApiResponse(
        data=AuthResponse(
            user=AuthenticatedUser.model_validate(user, from_attributes=True),
            token=token,
        ),
        message="Authentication successful",
    )


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_none=True,
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    """Retrieve a single user by ID."""
    try:
        user = await service.get_user(parse_id(user_id, "User"))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=UserResponse.model_validate(user, from_attributes=True))


@router.post(
    "",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    """Register a new user. Username and email must be unused."""
    try:
        user = await service.create_user(data)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ApiResponse(
        data=UserResponse.model_validate(user, from_attributes=True),
        message="User created successfully",
    )


@router.put(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_none=True,
)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    """Partially update an existing user."""
    try:
        user = await service.update_user(parse_id(user_id, "User"), data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ApiResponse(
        data=UserResponse.model_validate(user, from_attributes=True),
        message="User updated successfully",
    )


@router.delete(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    response_model_exclude_none=True,
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    """Delete a user by ID and return the removed record."""
    try:
        user = await service.delete_user(parse_id(user_id, "User"))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(
        data=UserResponse.model_validate(user, from_attributes=True),
        message="User deleted successfully",
    )
