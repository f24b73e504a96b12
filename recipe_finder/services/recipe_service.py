"""Recipe service for browsing, searching and editing recipes."""

import logging
import math
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from recipe_finder.exceptions import NotFoundError, ValidationError
from recipe_finder.models.mixins import is_object_id
from recipe_finder.models.recipe import (
    Recipe,
    RecipeComment,
    RecipeIngredient,
    RecipeInstruction,
    RecipeTag,
)
from recipe_finder.schemas.recipe import RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)

INVALID_RECIPE_ID = "Invalid recipe ID"
RECIPE_NOT_FOUND = "Recipe not found"


def get_recipe_by_id(db: Session, recipe_id: str) -> Recipe:
    """Load a recipe, rejecting malformed ids before touching the database."""
    if not is_object_id(recipe_id):
        raise ValidationError(INVALID_RECIPE_ID)
    recipe = db.query(Recipe).filter(Recipe.id == recipe_id.lower()).first()
    if not recipe:
        raise NotFoundError(RECIPE_NOT_FOUND)
    return recipe


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


class RecipeService:
    """Service for recipe CRUD and discovery queries."""

    def __init__(self, db: Session):
        self.db = db

    def list_recipes(
        self,
        cuisine: str | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Recipe], int]:
        """Return one page of recipes, newest first, and the total match count.

        ``cuisine`` is an exact match. ``search`` is a case-insensitive
        substring match against the name, the description or any tag.
        """
        query = self.db.query(Recipe)

        if cuisine:
            query = query.filter(Recipe.cuisine == cuisine)

        if search:
            query = query.filter(
                or_(
                    Recipe.name.icontains(search, autoescape=True),
                    Recipe.description.icontains(search, autoescape=True),
                    Recipe.tag_rows.any(RecipeTag.name.icontains(search, autoescape=True)),
                )
            )

        total = query.count()
        recipes = (
            query.options(
                selectinload(Recipe.ingredients),
                selectinload(Recipe.instructions),
                selectinload(Recipe.tag_rows),
                selectinload(Recipe.likes),
                selectinload(Recipe.ratings),
                selectinload(Recipe.comments).selectinload(RecipeComment.user),
            )
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return recipes, total

    def get_recipe(self, recipe_id: str) -> Recipe:
        return get_recipe_by_id(self.db, recipe_id)

    def create_recipe(self, recipe_data: RecipeCreate) -> Recipe:
        """Create a new recipe with its ingredients, steps and tags."""
        recipe = Recipe()
        self._apply_fields(recipe, recipe_data.model_dump())

        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Created recipe {recipe.id} ({recipe.name!r})")
        return recipe

    def update_recipe(self, recipe_id: str, recipe_data: RecipeUpdate) -> Recipe:
        """Apply the provided fields; embedded lists are replaced wholesale."""
        recipe = get_recipe_by_id(self.db, recipe_id)
        self._apply_fields(recipe, recipe_data.model_dump(exclude_unset=True))

        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Updated recipe {recipe.id}")
        return recipe

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe. Cart entries referencing it are left in place."""
        recipe = get_recipe_by_id(self.db, recipe_id)
        self.db.delete(recipe)
        self.db.commit()
        logger.info(f"Deleted recipe {recipe_id}")

    def list_cuisines(self) -> list[str]:
        """Distinct cuisine values across all recipes, sorted alphabetically."""
        rows = self.db.query(Recipe.cuisine).distinct().all()
        return sorted(cuisine for (cuisine,) in rows)

    def _apply_fields(self, recipe: Recipe, fields: dict[str, Any]) -> None:
        ingredients = fields.pop("ingredients", None)
        instructions = fields.pop("instructions", None)
        tags = fields.pop("tags", None)

        for key, value in fields.items():
            if key == "difficulty" and value is not None:
                value = value.value
            setattr(recipe, key, value)

        if ingredients is not None:
            recipe.ingredients = [
                RecipeIngredient(name=ing["name"], amount=ing["amount"]) for ing in ingredients
            ]
        if instructions is not None:
            recipe.instructions = [
                RecipeInstruction(step=step["step"], instruction=step["instruction"])
                for step in instructions
            ]
        if tags is not None:
            recipe.tags = tags
