"""Pydantic schemas for API requests and responses."""

from recipe_finder.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from recipe_finder.schemas.cart import CartAddRequest, CartItemResponse, CartRemoveRequest
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
    RecipeSummary,
    RecipeUpdate,
)
from recipe_finder.schemas.user import UserBrief, UserProfile, UserProfileUpdate

__all__ = [
    "ApiResponse",
    "Pagination",
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "UserBrief",
    "UserProfile",
    "UserProfileUpdate",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeSummary",
    "RecipeResponse",
    "CommentCreate",
    "CommentResponse",
    "LikeResult",
    "RatingRequest",
    "RatingSummary",
    "RatingResult",
    "CartAddRequest",
    "CartRemoveRequest",
    "CartItemResponse",
]
