"""User profile and follow schemas."""

from pydantic import Field, model_validator

from recipe_finder.schemas.auth import UserResponse
from recipe_finder.schemas.common import CamelModel


class UserBrief(CamelModel):
    """Minimal user card used in search results and follow lists."""

    id: str
    name: str
    email: str


class UserProfile(UserResponse):
    """Public profile with social counts."""

    followers_count: int
    following_count: int
    recipes_count: int
    is_following: bool = False


class UserProfileUpdate(CamelModel):
    """Profile fields a user may change on their own account."""

    name: str | None = Field(None, min_length=1, max_length=50)
    bio: str | None = Field(None, max_length=500)
    avatar: str | None = Field(None, max_length=500)

    @model_validator(mode="after")
    def reject_null_fields(self) -> "UserProfileUpdate":
        for field in sorted(self.model_fields_set):
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self
