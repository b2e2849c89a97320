# storefront/schemas/cart.py
from pydantic import ConfigDict, StrictInt
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

from storefront.models.cart import CartItem


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.

    Every field is optional here so that a missing id (or a missing body)
    is reported by the service as a 400 with the usual message, not as a
    schema error. quantity is strict: JSON true is not 1.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str | None = None
    quantity: StrictInt = 1


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart item.
    Zero or negative removes the item.
    """

    quantity: StrictInt


class CartSummary(SQLModel):
    """
    Cart with totals, for the storefront's cart badge.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[CartItem]
    total_quantity: int
    total_price: float
