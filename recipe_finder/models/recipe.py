"""Recipe model and its embedded collections."""

import math

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from recipe_finder.database import Base
from recipe_finder.models.enums import Difficulty
from recipe_finder.models.mixins import ObjectIdMixin, TimestampMixin, utcnow

DEFAULT_CREATOR = "Anonymous"


class Recipe(Base, ObjectIdMixin, TimestampMixin):
    """Recipe model for storing recipe definitions and their social activity."""

    __tablename__ = "recipes"

    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    cuisine = Column(String(100), nullable=False, index=True)
    image = Column(Text, nullable=True)
    prep_time = Column(Integer, nullable=False)
    cook_time = Column(Integer, nullable=False)
    servings = Column(Integer, nullable=False)
    difficulty = Column(String(10), nullable=False, default=Difficulty.EASY.value)
    created_by = Column(String(255), nullable=False, default=DEFAULT_CREATOR)
    is_public = Column(Boolean, nullable=False, default=True)

    # Relationships
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        order_by="RecipeIngredient.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    instructions = relationship(
        "RecipeInstruction",
        back_populates="recipe",
        order_by="RecipeInstruction.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    tag_rows = relationship(
        "RecipeTag",
        back_populates="recipe",
        order_by="RecipeTag.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    likes = relationship(
        "RecipeLike",
        back_populates="recipe",
        order_by="RecipeLike.id",
        cascade="all, delete-orphan",
    )
    ratings = relationship(
        "RecipeRating",
        back_populates="recipe",
        order_by="RecipeRating.id",
        cascade="all, delete-orphan",
    )
    comments = relationship(
        "RecipeComment",
        back_populates="recipe",
        order_by="RecipeComment.created_at",
        cascade="all, delete-orphan",
    )

    @property
    def tags(self) -> list[str]:
        return [tag.name for tag in self.tag_rows]

    @tags.setter
    def tags(self, names: list[str]) -> None:
        seen: list[str] = []
        for name in names:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        self.tag_rows = [RecipeTag(name=name) for name in seen]

    # --- Virtual fields, computed at read time ---

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    @property
    def comments_count(self) -> int:
        return len(self.comments)

    @property
    def ratings_count(self) -> int:
        return len(self.ratings)

    @property
    def average_rating(self) -> float:
        """Mean rating rounded to one decimal place, 0 when unrated."""
        if not self.ratings:
            return 0
        mean = sum(r.rating for r in self.ratings) / len(self.ratings)
        return math.floor(mean * 10 + 0.5) / 10

    def find_like(self, user_id: str) -> "RecipeLike | None":
        return next((like for like in self.likes if like.user_id == user_id), None)

    def find_rating(self, user_id: str) -> "RecipeRating | None":
        return next((r for r in self.ratings if r.user_id == user_id), None)


class RecipeIngredient(Base):
    """Ingredient line within a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    amount = Column(String(100), nullable=False)

    recipe = relationship("Recipe", back_populates="ingredients")


class RecipeInstruction(Base):
    """Numbered preparation step within a recipe."""

    __tablename__ = "recipe_instructions"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    step = Column(Integer, nullable=False)
    instruction = Column(Text, nullable=False)

    recipe = relationship("Recipe", back_populates="instructions")


class RecipeTag(Base):
    """Free-form tag attached to a recipe."""

    __tablename__ = "recipe_tags"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(100), nullable=False, index=True)

    recipe = relationship("Recipe", back_populates="tag_rows")


class RecipeLike(Base):
    """A user's like on a recipe."""

    __tablename__ = "recipe_likes"
    __table_args__ = (UniqueConstraint("recipe_id", "user_id", name="uq_recipe_likes_user"),)

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    recipe = relationship("Recipe", back_populates="likes")


class RecipeRating(Base, TimestampMixin):
    """A user's 1-5 star rating of a recipe."""

    __tablename__ = "recipe_ratings"
    __table_args__ = (UniqueConstraint("recipe_id", "user_id", name="uq_recipe_ratings_user"),)

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating = Column(Integer, nullable=False)

    recipe = relationship("Recipe", back_populates="ratings")


class RecipeComment(Base, ObjectIdMixin, TimestampMixin):
    """A user's comment on a recipe."""

    __tablename__ = "recipe_comments"

    recipe_id = Column(
        String(24), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(String(500), nullable=False)

    recipe = relationship("Recipe", back_populates="comments")
    user = relationship("User")
