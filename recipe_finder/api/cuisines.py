"""Cuisine API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_finder.api.dependencies import get_recipe_service
from recipe_finder.schemas.common import ApiResponse
from recipe_finder.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/cuisines", tags=["cuisines"])


@router.get("", response_model=ApiResponse[list[str]])
async def list_cuisines(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """List the distinct cuisines present across all recipes."""
    return ApiResponse(data=service.list_cuisines())
