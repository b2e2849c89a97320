# storefront/routers/products.py
from fastapi import APIRouter, Depends

from storefront.dependencies import get_product_service
from storefront.models.product import Product
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
):
    """
    List the whole catalog, in seed order.
    """
    return service.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """
    Get a single product.

    - 404 if the id is not in the catalog.
    """
    return service.get_product(product_id)
