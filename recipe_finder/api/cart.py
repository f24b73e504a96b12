"""Cart API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_finder.api.dependencies import get_cart_service, get_current_user
from recipe_finder.models.user import CartItem, User
from recipe_finder.schemas.cart import CartAddRequest, CartItemResponse, CartRemoveRequest
from recipe_finder.schemas.common import ApiResponse
from recipe_finder.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def serialize_cart(items: list[CartItem]) -> list[CartItemResponse]:
    return [CartItemResponse.model_validate(item) for item in items]


@router.get("", response_model=ApiResponse[list[CartItemResponse]])
async def get_cart(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CartService, Depends(get_cart_service)],
):
    """Get the current user's cart with recipes resolved."""
    return ApiResponse(data=serialize_cart(service.get_cart(current_user)))


@router.post("", response_model=ApiResponse[list[CartItemResponse]])
async def add_to_cart(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CartService, Depends(get_cart_service)],
    request: CartAddRequest | None = None,
):
    """Add a recipe to the cart."""
    request = request or CartAddRequest()
    items = service.add_item(current_user, request.recipe_id, request.quantity)
    return ApiResponse(message="Recipe added to cart", data=serialize_cart(items))


@router.delete("", response_model=ApiResponse[list[CartItemResponse]])
async def remove_from_cart(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CartService, Depends(get_cart_service)],
    request: CartRemoveRequest | None = None,
):
    """Remove an entry from the cart. Unknown entries are ignored."""
    request = request or CartRemoveRequest()
    items = service.remove_item(current_user, request.item_id)
    return ApiResponse(message="Item removed from cart", data=serialize_cart(items))
