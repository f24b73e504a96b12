"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from recipe_finder.database import get_db
from recipe_finder.exceptions import AuthenticationError, NotFoundError
from recipe_finder.models.user import User
from recipe_finder.services.auth import decode_access_token
from recipe_finder.services.cart_service import CartService
from recipe_finder.services.recipe_service import RecipeService
from recipe_finder.services.social_service import SocialService
from recipe_finder.services.user_service import UserService

# Missing credentials are reported by get_current_user_id, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Get the authenticated user's id from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(reason="missing_token")
    payload = decode_access_token(credentials.credentials)
    return str(payload["sub"])


def get_optional_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Get the caller's id when a valid bearer token is sent, otherwise None."""
    if credentials is None or not credentials.credentials:
        return None
    try:
        return str(decode_access_token(credentials.credentials)["sub"])
    except AuthenticationError:
        return None


def get_current_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user."""
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_social_service(
    db: Annotated[Session, Depends(get_db)],
) -> SocialService:
    """Get social service with dependencies."""
    return SocialService(db)


def get_cart_service(
    db: Annotated[Session, Depends(get_db)],
) -> CartService:
    """Get cart service with dependencies."""
    return CartService(db)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)
