"""
User API endpoints.

Registration, login, password reset and public profile lookup.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_service
from shared.models import SuccessResponse

from .interfaces import IUserService
from .models import (
    CreateUserRequest,
    LoginRequest,
    PublicUser,
    ResetPasswordRequest,
    UserResponse,
)

router = APIRouter()


@router.post("/create", response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new user."""
    user = await service.create_user(
        request.username,
        request.password,
        request.display_name,
    )
    return UserResponse(user=user)


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Log in with username and password."""
    user = await service.login(request.username, request.password)
    return UserResponse(user=user)


@router.post("/reset-password", response_model=SuccessResponse)
async def reset_password(
    request: ResetPasswordRequest,
    service: IUserService = Depends(get_user_service),
) -> SuccessResponse:
    """
    Reset a password by username.

    No proof of the old password is required.
    """
    await service.reset_password(request.username, request.new_password)
    return SuccessResponse()


@router.get("/{user_id}", response_model=PublicUser)
async def get_user(
    user_id: str,
    service: IUserService = Depends(get_user_service),
) -> PublicUser:
    """Get a user's public profile."""
    user = await service.require_user(user_id)
    return user.to_public()
