# storefront/models/order.py
import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from storefront.models.cart import CartItem

OrderStatus = Literal["confirmed"]


class Order(SQLModel):
    """
    Checkout receipt.

    Built from a cart snapshot and returned to the client; orders are
    not kept anywhere after the response is sent.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    user_id: str

    items: list[CartItem]

    total: float = Field(
        ge=0,
        description="Sum of price * quantity over items",
    )

    status: OrderStatus = "confirmed"

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
