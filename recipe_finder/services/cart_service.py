"""Cart service for the per-user recipe cart."""

import logging

from sqlalchemy.orm import Session

from recipe_finder.exceptions import ValidationError
from recipe_finder.models.user import CartItem, User
from recipe_finder.services.recipe_service import get_recipe_by_id

logger = logging.getLogger(__name__)


class CartService:
    """Service for reading and mutating a user's cart."""

    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, user: User) -> list[CartItem]:
        return list(user.cart)

    def add_item(self, user: User, recipe_id: str | None, quantity: int = 1) -> list[CartItem]:
        """Add a recipe to the cart; an existing entry accumulates the quantity."""
        if not recipe_id:
            raise ValidationError("Recipe ID is required")
        recipe = get_recipe_by_id(self.db, recipe_id)

        existing = user.find_cart_item(recipe.id)
        if existing:
            existing.quantity += quantity
        else:
            user.cart.append(CartItem(recipe_id=recipe.id, quantity=quantity))

        self.db.commit()
        logger.info(f"User {user.id} added recipe {recipe.id} x{quantity} to cart")
        return self.get_cart(user)

    def remove_item(self, user: User, item_id: str | None) -> list[CartItem]:
        """Drop a cart entry by its id. Unknown ids leave the cart unchanged."""
        if not item_id:
            raise ValidationError("Item ID is required")

        remaining = [item for item in user.cart if item.id != item_id]
        if len(remaining) != len(user.cart):
            user.cart = remaining
            self.db.commit()
            logger.info(f"User {user.id} removed cart item {item_id}")
        return self.get_cart(user)
