# storefront/schemas/order.py
from sqlmodel import SQLModel

from storefront.models.order import Order


class CheckoutResponse(SQLModel):
    """
    Response body of a successful checkout.
    """

    message: str = "Order placed successfully"
    order: Order
