"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from recipe_finder.api.dependencies import (
    get_current_user,
    get_recipe_service,
    get_social_service,
)
from recipe_finder.config import get_settings
from recipe_finder.models.user import User
from recipe_finder.schemas.common import ApiResponse, Pagination
from recipe_finder.schemas.recipe import (
    CommentCreate,
    CommentResponse,
    LikeResult,
    RatingRequest,
    RatingResult,
    RatingSummary,
    RecipeCreate,
    RecipeResponse,
    RecipeUpdate,
)
from recipe_finder.services.recipe_service import RecipeService, total_pages
from recipe_finder.services.social_service import SocialService

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=ApiResponse[list[RecipeResponse]])
async def list_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    cuisine: str | None = None,
    search: str | None = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    """List recipes newest first, optionally filtered by cuisine and search text."""
    limit = limit or get_settings().default_page_size
    recipes, total = service.list_recipes(cuisine=cuisine, search=search, page=page, limit=limit)
    return ApiResponse(
        data=[RecipeResponse.model_validate(r) for r in recipes],
        pagination=Pagination(current=page, pages=total_pages(total, limit), total=total),
    )


@router.post(
    "",
    response_model=ApiResponse[RecipeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    recipe_data: RecipeCreate,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Create a new recipe."""
    recipe = service.create_recipe(recipe_data)
    return ApiResponse(data=RecipeResponse.model_validate(recipe))


@router.get("/{recipe_id}", response_model=ApiResponse[RecipeResponse])
async def get_recipe(
    recipe_id: str,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a single recipe."""
    return ApiResponse(data=RecipeResponse.model_validate(service.get_recipe(recipe_id)))


@router.put("/{recipe_id}", response_model=ApiResponse[RecipeResponse])
async def update_recipe(
    recipe_id: str,
    recipe_data: RecipeUpdate,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update the provided recipe fields."""
    recipe = service.update_recipe(recipe_id, recipe_data)
    return ApiResponse(data=RecipeResponse.model_validate(recipe))


@router.delete("/{recipe_id}", response_model=ApiResponse[None])
async def delete_recipe(
    recipe_id: str,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe permanently."""
    service.delete_recipe(recipe_id)
    return ApiResponse(message="Recipe deleted successfully")


# --- Likes ---


@router.post("/{recipe_id}/like", response_model=ApiResponse[LikeResult])
async def toggle_like(
    recipe_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SocialService, Depends(get_social_service)],
):
    """Like the recipe, or unlike it if already liked."""
    liked, likes_count = service.toggle_like(recipe_id, current_user)
    return ApiResponse(
        message="Recipe liked" if liked else "Recipe unliked",
        data=LikeResult(liked=liked, likes_count=likes_count),
    )


# --- Ratings ---


@router.post("/{recipe_id}/rating", response_model=ApiResponse[RatingResult])
async def rate_recipe(
    recipe_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SocialService, Depends(get_social_service)],
    rating_data: RatingRequest | None = None,
):
    """Add or update a 1-5 rating; 0 removes the caller's rating."""
    rating_data = rating_data or RatingRequest()
    message, result = service.rate_recipe(recipe_id, current_user, rating_data.rating)
    return ApiResponse(message=message, data=RatingResult(**result))


@router.delete("/{recipe_id}/rating", response_model=ApiResponse[RatingSummary])
async def remove_rating(
    recipe_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SocialService, Depends(get_social_service)],
):
    """Remove the caller's rating."""
    summary = service.remove_rating(recipe_id, current_user)
    return ApiResponse(message="Rating removed successfully", data=RatingSummary(**summary))


# --- Comments ---


@router.get("/{recipe_id}/comments", response_model=ApiResponse[list[CommentResponse]])
async def list_comments(
    recipe_id: str,
    service: Annotated[SocialService, Depends(get_social_service)],
):
    """List a recipe's comments, oldest first."""
    comments = service.list_comments(recipe_id)
    return ApiResponse(data=[CommentResponse.model_validate(c) for c in comments])


@router.post(
    "/{recipe_id}/comments",
    response_model=ApiResponse[CommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    recipe_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[SocialService, Depends(get_social_service)],
    comment_data: CommentCreate | None = None,
):
    """Add a comment to a recipe."""
    comment_data = comment_data or CommentCreate()
    comment = service.add_comment(recipe_id, current_user, comment_data.content)
    return ApiResponse(
        message="Comment added successfully", data=CommentResponse.model_validate(comment)
    )
