# storefront/models/product.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class Product(SQLModel):
    """
    Catalog entry.

    Seeded once at startup and never mutated afterwards.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Opaque catalog identifier")

    name: str = Field(description="Display name")

    description: str = Field(
        default="",
        description="Short marketing description",
    )

    price: float = Field(
        ge=0,
        description="Unit price",
    )
