# storefront/routers/checkout.py
from fastapi import APIRouter, Depends

from storefront.dependencies import get_order_service
from storefront.schemas.order import CheckoutResponse
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.post("/{user_id}", response_model=CheckoutResponse)
def checkout(
    user_id: str,
    service: OrderService = Depends(get_order_service),
):
    """
    Turn the user's cart into an order and empty the cart.

    - 400 if the cart is missing or empty.
    """
    order = service.checkout(user_id)
    return CheckoutResponse(order=order)
