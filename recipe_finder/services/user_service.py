"""User profiles, user search and the follow graph."""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from recipe_finder.exceptions import ForbiddenError, NotFoundError, ValidationError
from recipe_finder.models.mixins import is_object_id
from recipe_finder.models.recipe import Recipe
from recipe_finder.models.user import User, UserFollow
from recipe_finder.schemas.user import UserProfileUpdate

logger = logging.getLogger(__name__)

INVALID_USER_ID = "Invalid user ID"
USER_NOT_FOUND = "User not found"

MIN_SEARCH_LENGTH = 2
SEARCH_LIMIT = 10


def validate_user_id(user_id: str) -> str:
    if not is_object_id(user_id):
        raise ValidationError(INVALID_USER_ID)
    return user_id.lower()


def get_user_by_id(db: Session, user_id: str) -> User:
    """Load a user, rejecting malformed ids before touching the database."""
    user = db.query(User).filter(User.id == validate_user_id(user_id)).first()
    if not user:
        raise NotFoundError(USER_NOT_FOUND)
    return user


class UserService:
    """Service for profiles and follow relationships."""

    def __init__(self, db: Session):
        self.db = db

    def search_users(self, query: str | None) -> list[User]:
        """Match name or email, case-insensitively. Short queries match nothing."""
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        return (
            self.db.query(User)
            .filter(
                or_(
                    User.name.icontains(query, autoescape=True),
                    User.email.icontains(query, autoescape=True),
                )
            )
            .order_by(User.name)
            .limit(SEARCH_LIMIT)
            .all()
        )

    def get_profile(self, user_id: str, viewer_id: str | None = None) -> tuple[User, dict]:
        """Load a user together with their social counts.

        Returns:
            (user, {"followers_count", "following_count", "recipes_count", "is_following"})
        """
        user = get_user_by_id(self.db, user_id)
        recipes_count = self.db.query(Recipe).filter(Recipe.created_by == user.id).count()
        is_following = viewer_id is not None and any(
            link.follower_id == viewer_id for link in user.follower_links
        )
        return user, {
            "followers_count": user.followers_count,
            "following_count": user.following_count,
            "recipes_count": recipes_count,
            "is_following": is_following,
        }

    def update_profile(self, user: User, user_id: str, profile_data: UserProfileUpdate) -> User:
        """Apply profile changes. Users may only edit their own profile."""
        if validate_user_id(user_id) != user.id:
            raise ForbiddenError("Unauthorized to update this profile")

        for key, value in profile_data.model_dump(exclude_unset=True).items():
            setattr(user, key, value)

        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Updated profile of user {user.id}")
        return user

    def follow(self, user: User, target_id: str) -> None:
        target_id = validate_user_id(target_id)
        if target_id == user.id:
            raise ValidationError("Cannot follow yourself")
        target = get_user_by_id(self.db, target_id)
        if user.find_following(target.id):
            raise ValidationError("Already following this user")

        user.following_links.append(UserFollow(followed_id=target.id))
        self.db.commit()
        logger.info(f"User {user.id} followed user {target.id}")

    def unfollow(self, user: User, target_id: str) -> None:
        target = get_user_by_id(self.db, target_id)
        link = user.find_following(target.id)
        if not link:
            raise ValidationError("Not following this user")

        user.following_links.remove(link)
        self.db.delete(link)
        self.db.commit()
        logger.info(f"User {user.id} unfollowed user {target.id}")

    def list_followers(self, user_id: str) -> list[User]:
        return get_user_by_id(self.db, user_id).followers

    def list_following(self, user_id: str) -> list[User]:
        return get_user_by_id(self.db, user_id).following
