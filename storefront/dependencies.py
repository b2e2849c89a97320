# storefront/dependencies.py
from functools import lru_cache

from fastapi import Depends

from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService


# ---------------------------------------------------------
# Process-wide state
#
# The catalog and the carts live in memory for the lifetime of the
# process. lru_cache makes each repository a singleton shared by all
# routers; tests swap them out via app.dependency_overrides.
# ---------------------------------------------------------


@lru_cache
def get_product_repo() -> ProductRepository:
    return ProductRepository()


@lru_cache
def get_cart_repo() -> CartRepository:
    return CartRepository()


def get_product_service(
    repo: ProductRepository = Depends(get_product_repo),
) -> ProductService:
    return ProductService(repo)


def get_cart_service(
    cart_repo: CartRepository = Depends(get_cart_repo),
    product_service: ProductService = Depends(get_product_service),
) -> CartService:
    return CartService(cart_repo, product_service)


def get_order_service(
    cart_repo: CartRepository = Depends(get_cart_repo),
) -> OrderService:
    return OrderService(cart_repo)
