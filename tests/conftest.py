import pytest
from fastapi.testclient import TestClient

from storefront.dependencies import get_cart_repo, get_product_repo
from storefront.main import app
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService


@pytest.fixture
def product_repo() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
def cart_repo() -> CartRepository:
    return CartRepository()


@pytest.fixture
def product_service(product_repo: ProductRepository) -> ProductService:
    return ProductService(product_repo)


@pytest.fixture
def cart_service(cart_repo: CartRepository, product_service: ProductService) -> CartService:
    return CartService(cart_repo, product_service)


@pytest.fixture
def order_service(cart_repo: CartRepository) -> OrderService:
    return OrderService(cart_repo)


@pytest.fixture
def test_client(product_repo: ProductRepository, cart_repo: CartRepository):
    """
    TestClient whose routers share this test's repositories.
    """
    app.dependency_overrides[get_product_repo] = lambda: product_repo
    app.dependency_overrides[get_cart_repo] = lambda: cart_repo
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
