"""Cart schemas."""

from datetime import datetime

from pydantic import Field

from recipe_finder.schemas.common import CamelModel
from recipe_finder.schemas.recipe import RecipeSummary


class CartAddRequest(CamelModel):
    """Add a recipe to the cart, merging with an existing entry."""

    recipe_id: str | None = None
    quantity: int = Field(1, ge=1)


class CartRemoveRequest(CamelModel):
    item_id: str | None = None


class CartItemResponse(CamelModel):
    """Cart entry with its recipe resolved (null once the recipe is gone)."""

    id: str
    recipe_id: str
    recipe: RecipeSummary | None
    quantity: int
    added_at: datetime
