"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from recipe_finder.api.dependencies import get_current_user
from recipe_finder.database import get_db
from recipe_finder.exceptions import ApiError, ValidationError
from recipe_finder.models.user import User
from recipe_finder.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from recipe_finder.schemas.common import ApiResponse
from recipe_finder.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_email,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    if get_user_by_email(db, user_data.email):
        raise ValidationError("User already exists with this email")

    user = create_user(db, user_data.name, user_data.email, user_data.password)
    token = create_access_token(user.id, user.email)

    return ApiResponse(
        message="User created successfully",
        data=AuthResponse(user=UserResponse.model_validate(user), token=token),
    )


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise ApiError("Invalid credentials", status_code=status.HTTP_401_UNAUTHORIZED)

    token = create_access_token(user.id, user.email)

    return ApiResponse(
        message="Login successful",
        data=AuthResponse(user=UserResponse.model_validate(user), token=token),
    )


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return ApiResponse(data=UserResponse.model_validate(current_user))
