"""Likes, ratings and comments on recipes."""

import logging

from sqlalchemy.orm import Session

from recipe_finder.exceptions import NotFoundError, ValidationError
from recipe_finder.models.recipe import RecipeComment, RecipeLike, RecipeRating
from recipe_finder.models.user import User
from recipe_finder.services.recipe_service import get_recipe_by_id

logger = logging.getLogger(__name__)

# A submitted rating of 0 removes the caller's existing rating
REMOVE_RATING = 0
MIN_RATING = 1
MAX_RATING = 5
MAX_COMMENT_LENGTH = 500

NO_RATING_TO_REMOVE = "No rating found to remove"


class SocialService:
    """Service for per-user interactions with a recipe."""

    def __init__(self, db: Session):
        self.db = db

    def toggle_like(self, recipe_id: str, user: User) -> tuple[bool, int]:
        """Flip the user's like on a recipe.

        Returns:
            (liked, likes_count) after the toggle.
        """
        recipe = get_recipe_by_id(self.db, recipe_id)

        existing = recipe.find_like(user.id)
        if existing:
            recipe.likes.remove(existing)
            liked = False
        else:
            recipe.likes.append(RecipeLike(user_id=user.id))
            liked = True

        self.db.commit()
        logger.info(f"User {user.id} {'liked' if liked else 'unliked'} recipe {recipe.id}")
        return liked, recipe.likes_count

    def rate_recipe(self, recipe_id: str, user: User, rating: int | None) -> tuple[str, dict]:
        """Add, update or (with 0) remove the user's rating.

        Returns:
            (message, {"rating", "average_rating", "ratings_count"})
        """
        recipe = get_recipe_by_id(self.db, recipe_id)

        if rating is None or not (rating == REMOVE_RATING or MIN_RATING <= rating <= MAX_RATING):
            raise ValidationError("Rating must be between 1 and 5, or 0 to remove rating")

        existing = recipe.find_rating(user.id)
        if rating == REMOVE_RATING:
            if not existing:
                raise NotFoundError(NO_RATING_TO_REMOVE)
            recipe.ratings.remove(existing)
            message = "Rating removed successfully"
        elif existing:
            existing.rating = rating
            message = "Rating updated successfully"
        else:
            recipe.ratings.append(RecipeRating(user_id=user.id, rating=rating))
            message = "Rating added successfully"

        self.db.commit()
        logger.info(f"User {user.id} rated recipe {recipe.id}: {rating}")

        summary = self._rating_summary(recipe.id)
        summary["rating"] = rating
        return message, summary

    def remove_rating(self, recipe_id: str, user: User) -> dict:
        """Remove the user's rating; 404 when there was none."""
        recipe = get_recipe_by_id(self.db, recipe_id)

        initial_count = len(recipe.ratings)
        recipe.ratings = [r for r in recipe.ratings if r.user_id != user.id]
        if len(recipe.ratings) == initial_count:
            raise NotFoundError(NO_RATING_TO_REMOVE)

        self.db.commit()
        logger.info(f"User {user.id} removed rating on recipe {recipe.id}")
        return self._rating_summary(recipe.id)

    def list_comments(self, recipe_id: str) -> list[RecipeComment]:
        return list(get_recipe_by_id(self.db, recipe_id).comments)

    def add_comment(self, recipe_id: str, user: User, content: str | None) -> RecipeComment:
        """Append a comment to a recipe."""
        recipe = get_recipe_by_id(self.db, recipe_id)

        content = (content or "").strip()
        if not content:
            raise ValidationError("Comment content is required")
        if len(content) > MAX_COMMENT_LENGTH:
            raise ValidationError("Comment cannot be more than 500 characters")

        comment = RecipeComment(user_id=user.id, content=content)
        recipe.comments.append(comment)
        self.db.commit()
        self.db.refresh(comment)
        logger.info(f"User {user.id} commented on recipe {recipe.id}")
        return comment

    def _rating_summary(self, recipe_id: str) -> dict:
        # Virtual fields are only meaningful on a freshly loaded document
        recipe = get_recipe_by_id(self.db, recipe_id)
        return {"average_rating": recipe.average_rating, "ratings_count": recipe.ratings_count}
