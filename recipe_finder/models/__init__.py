"""SQLAlchemy models."""

from recipe_finder.models.recipe import (
    Recipe,
    RecipeComment,
    RecipeIngredient,
    RecipeInstruction,
    RecipeLike,
    RecipeRating,
    RecipeTag,
)
from recipe_finder.models.user import CartItem, User, UserFollow

__all__ = [
    "User",
    "UserFollow",
    "CartItem",
    "Recipe",
    "RecipeIngredient",
    "RecipeInstruction",
    "RecipeTag",
    "RecipeLike",
    "RecipeRating",
    "RecipeComment",
]
