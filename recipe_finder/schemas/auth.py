"""Authentication schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from recipe_finder.schemas.common import CamelModel


class UserRegister(CamelModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(CamelModel):
    """User information response."""

    id: str
    name: str
    email: str
    avatar: str
    bio: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str
