# storefront/models/cart.py
import uuid

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


def new_item_id() -> str:
    return str(uuid.uuid4())


class CartItem(SQLModel):
    """
    Shopping cart entry for a user.
    One cart cannot hold 2 items for the same product.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(
        default_factory=new_item_id,
        description="Generated on first add, never reused",
    )

    product_id: str = Field(
        description="Catalog product this item refers to",
    )

    name: str = Field(
        description="Product name when added to cart",
    )

    price: float = Field(
        description="Price when added to cart",
    )

    quantity: int = Field(
        ge=1,
        description="Must be >= 1",
    )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
