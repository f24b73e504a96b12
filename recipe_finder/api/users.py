"""User profile and follow API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_finder.api.dependencies import (
    get_current_user,
    get_optional_user_id,
    get_user_service,
)
from recipe_finder.models.user import User
from recipe_finder.schemas.auth import UserResponse
from recipe_finder.schemas.common import ApiResponse
from recipe_finder.schemas.user import UserBrief, UserProfile, UserProfileUpdate
from recipe_finder.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/search", response_model=ApiResponse[list[UserBrief]])
async def search_users(
    service: Annotated[UserService, Depends(get_user_service)],
    q: str | None = None,
):
    """Search users by name or email (at least two characters)."""
    users = service.search_users(q)
    return ApiResponse(data=[UserBrief.model_validate(u) for u in users])


@router.get("/{user_id}", response_model=ApiResponse[UserProfile])
async def get_profile(
    user_id: str,
    viewer_id: Annotated[str | None, Depends(get_optional_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a public profile. ``isFollowing`` reflects the caller when authenticated."""
    user, stats = service.get_profile(user_id, viewer_id)
    return ApiResponse(data=UserProfile(**UserResponse.model_validate(user).model_dump(), **stats))


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_profile(
    user_id: str,
    profile_data: UserProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the caller's own name, bio or avatar."""
    user = service.update_profile(current_user, user_id, profile_data)
    return ApiResponse(
        message="Profile updated successfully", data=UserResponse.model_validate(user)
    )


# --- Follow graph ---


@router.post("/{user_id}/follow", response_model=ApiResponse[None])
async def follow_user(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Follow another user."""
    service.follow(current_user, user_id)
    return ApiResponse(message="Successfully followed user")


@router.delete("/{user_id}/follow", response_model=ApiResponse[None])
async def unfollow_user(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Stop following a user."""
    service.unfollow(current_user, user_id)
    return ApiResponse(message="Successfully unfollowed user")


@router.get("/{user_id}/followers", response_model=ApiResponse[list[UserBrief]])
async def list_followers(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
):
    return ApiResponse(data=[UserBrief.model_validate(u) for u in service.list_followers(user_id)])


@router.get("/{user_id}/following", response_model=ApiResponse[list[UserBrief]])
async def list_following(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
):
    return ApiResponse(data=[UserBrief.model_validate(u) for u in service.list_following(user_id)])
