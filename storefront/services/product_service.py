# storefront/services/product_service.py
from storefront.core.errors import NotFoundError
from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository


class ProductService:
    """
    Read-only access to the catalog for the API and the cart.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self) -> list[Product]:
        return self.repo.list()

    def get_product(self, product_id: str) -> Product:
        product = self.repo.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
