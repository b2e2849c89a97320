# storefront/repositories/product_repo.py
from typing import Iterable

from storefront.models.product import Product

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Wireless Bluetooth Headphones",
        price=79.99,
        description="High-quality wireless headphones with noise cancellation",
    ),
    Product(
        id="2",
        name="Smart Fitness Watch",
        price=199.99,
        description="Track your fitness goals with this advanced smartwatch",
    ),
    Product(
        id="3",
        name="Portable Power Bank",
        price=49.99,
        description="20000mAh power bank for charging on the go",
    ),
    Product(
        id="4",
        name="USB-C Charging Cable",
        price=19.99,
        description="Fast charging USB-C cable, 6ft length",
    ),
    Product(
        id="5",
        name="Gaming Mechanical Keyboard",
        price=129.99,
        description="RGB backlit mechanical keyboard for gaming",
    ),
    Product(
        id="6",
        name="Wireless Mouse",
        price=39.99,
        description="Ergonomic wireless mouse with precision tracking",
    ),
)


class ProductRepository:
    """
    Read-only, in-memory product catalog.

    - Seeded once in the constructor, keeps seed order.
    - No FastAPI, no business logic.
    """

    def __init__(self, products: Iterable[Product] = SEED_PRODUCTS):
        self._products: list[Product] = list(products)
        self._by_id: dict[str, Product] = {p.id: p for p in self._products}

    def list(self) -> list[Product]:
        return list(self._products)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def count(self) -> int:
        return len(self._products)
