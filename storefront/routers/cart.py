# storefront/routers/cart.py
from fastapi import APIRouter, Depends

from storefront.dependencies import get_cart_service
from storefront.models.cart import CartItem
from storefront.schemas.cart import CartItemCreate, CartItemUpdate, CartSummary
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("/{user_id}", response_model=list[CartItem])
def get_cart(
    user_id: str,
    service: CartService = Depends(get_cart_service),
):
    """
    Get a user's cart. Unknown users get an empty list.
    """
    return service.get_cart(user_id)


@router.get("/{user_id}/summary", response_model=CartSummary)
def get_cart_summary(
    user_id: str,
    service: CartService = Depends(get_cart_service),
):
    """
    Get a user's cart with total quantity and total price.
    """
    return service.get_summary(user_id)


@router.post("/{user_id}", response_model=list[CartItem])
def add_to_cart(
    user_id: str,
    payload: CartItemCreate | None = None,
    service: CartService = Depends(get_cart_service),
):
    """
    Add a product to the cart.

    A request without a body is treated like one without productId.
    Returns the updated cart.
    """
    if payload is None:
        payload = CartItemCreate()
    return service.add_item(user_id, payload.product_id, payload.quantity)


@router.put("/{user_id}/{item_id}", response_model=list[CartItem])
def update_cart_item(
    user_id: str,
    item_id: str,
    payload: CartItemUpdate,
    service: CartService = Depends(get_cart_service),
):
    """
    Set the quantity of a cart item; 0 or less removes it.

    Returns the updated cart.
    """
    return service.update_quantity(
        user_id=user_id,
        item_id=item_id,
        quantity=payload.quantity,
    )


@router.delete("/{user_id}/{item_id}", response_model=list[CartItem])
def remove_cart_item(
    user_id: str,
    item_id: str,
    service: CartService = Depends(get_cart_service),
):
    """
    Remove an item from the cart.

    Returns the updated cart.
    """
    return service.remove_item(user_id, item_id)


@router.delete("/{user_id}", response_model=list[CartItem])
def clear_cart(
    user_id: str,
    service: CartService = Depends(get_cart_service),
):
    """
    Clear the entire cart.

    Returns an empty list.
    """
    return service.clear_cart(user_id)
