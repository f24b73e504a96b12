"""Shared schema pieces: camelCase base model and the response envelope."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model that reads snake_case attributes and speaks camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class Pagination(BaseModel):
    """Page summary returned alongside list results."""

    current: int
    pages: int
    total: int


class ApiResponse(BaseModel, Generic[T]):
    """Uniform ``{success, data, message, error, pagination}`` envelope.

    Members left as None are omitted from the JSON body.
    """

    success: bool = True
    data: T | None = None
    message: str | None = None
    error: str | None = None
    pagination: Pagination | None = None

    @model_serializer(mode="wrap")
    def _omit_empty_members(self, handler) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}
