"""Recipe schemas."""

from datetime import datetime

from pydantic import AliasChoices, Field, model_validator

from recipe_finder.models.enums import Difficulty
from recipe_finder.schemas.common import CamelModel

# --- Embedded pieces ---


class IngredientIn(CamelModel):
    """Ingredient line in a create/update request."""

    name: str = Field(..., min_length=1, max_length=255)
    amount: str = Field(..., min_length=1, max_length=100)


class InstructionIn(CamelModel):
    """Numbered step in a create/update request."""

    step: int
    instruction: str = Field(..., min_length=1)


class IngredientResponse(CamelModel):
    name: str
    amount: str


class InstructionResponse(CamelModel):
    step: int
    instruction: str


class LikeResponse(CamelModel):
    """A like, identified by the liking user's id."""

    user: str = Field(validation_alias=AliasChoices("user_id", "user"), serialization_alias="user")
    created_at: datetime


class RatingResponse(CamelModel):
    user: str = Field(validation_alias=AliasChoices("user_id", "user"), serialization_alias="user")
    rating: int
    created_at: datetime
    updated_at: datetime


class CommentAuthor(CamelModel):
    id: str
    name: str
    avatar: str


class CommentResponse(CamelModel):
    """Comment with its author resolved."""

    id: str
    user: CommentAuthor | None
    content: str
    created_at: datetime
    updated_at: datetime


class CommentCreate(CamelModel):
    content: str | None = None


# --- Recipe ---

# Fields that may be omitted from an update but never set to null
REQUIRED_RECIPE_FIELDS = {
    "name",
    "description",
    "cuisine",
    "prep_time",
    "cook_time",
    "servings",
    "difficulty",
    "ingredients",
    "instructions",
    "tags",
    "created_by",
    "is_public",
}


class RecipeCreate(CamelModel):
    """Create a new recipe."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    cuisine: str = Field(..., min_length=1, max_length=100)
    image: str | None = None
    ingredients: list[IngredientIn] = []
    instructions: list[InstructionIn] = []
    prep_time: int = Field(..., ge=1)
    cook_time: int = Field(..., ge=1)
    servings: int = Field(..., ge=1)
    difficulty: Difficulty
    tags: list[str] = []
    created_by: str = Field("Anonymous", max_length=255)
    is_public: bool = True


class RecipeUpdate(CamelModel):
    """Partial update of a recipe; only provided fields are applied."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, min_length=1, max_length=500)
    cuisine: str | None = Field(None, min_length=1, max_length=100)
    image: str | None = None
    ingredients: list[IngredientIn] | None = None
    instructions: list[InstructionIn] | None = None
    prep_time: int | None = Field(None, ge=1)
    cook_time: int | None = Field(None, ge=1)
    servings: int | None = Field(None, ge=1)
    difficulty: Difficulty | None = None
    tags: list[str] | None = None
    created_by: str | None = Field(None, max_length=255)
    is_public: bool | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "RecipeUpdate":
        for field in sorted(self.model_fields_set & REQUIRED_RECIPE_FIELDS):
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class RecipeSummary(CamelModel):
    """Recipe card without embedded social activity."""

    id: str
    name: str
    description: str
    cuisine: str
    image: str | None
    prep_time: int
    cook_time: int
    servings: int
    difficulty: str
    tags: list[str]
    created_by: str
    likes_count: int
    ratings_count: int
    average_rating: float


class RecipeResponse(RecipeSummary):
    """Full recipe document including virtual fields."""

    ingredients: list[IngredientResponse]
    instructions: list[InstructionResponse]
    is_public: bool
    likes: list[LikeResponse]
    ratings: list[RatingResponse]
    comments: list[CommentResponse]
    comments_count: int
    created_at: datetime
    updated_at: datetime


# --- Social actions ---


class LikeResult(CamelModel):
    liked: bool
    likes_count: int


class RatingRequest(CamelModel):
    rating: int | None = None


class RatingSummary(CamelModel):
    average_rating: float
    ratings_count: int


class RatingResult(RatingSummary):
    rating: int
