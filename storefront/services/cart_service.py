# storefront/services/cart_service.py
from storefront.core.errors import NotFoundError, ValidationError
from storefront.models.cart import CartItem
from storefront.repositories.cart_repo import CartRepository
from storefront.services.product_service import ProductService
from storefront.schemas.cart import CartSummary


def snapshot(items: list[CartItem]) -> list[CartItem]:
    """
    Copy cart items so callers never see later in-place mutations.
    """
    return [item.model_copy() for item in items]


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate product existence against the catalog
      - keep one item per product (adds accumulate quantity)
      - snapshot name/price from the product at add time
      - run every operation under the user's lock
    """

    def __init__(self, cart_repo: CartRepository, product_service: ProductService):
        self.cart_repo = cart_repo
        self.product_service = product_service

    # ---- public operations ----

    def get_cart(self, user_id: str) -> list[CartItem]:
        """
        Return the user's cart; a user without a cart gets [].
        """
        with self.cart_repo.locked(user_id):
            return snapshot(self.cart_repo.list_for_user(user_id))

    def get_summary(self, user_id: str) -> CartSummary:
        """
        Return the cart with total_quantity and total_price.
        """
        items = self.get_cart(user_id)

        total_qty = 0
        total_price = 0.0
        for it in items:
            total_qty += it.quantity
            total_price += it.line_total

        return CartSummary(
            items=items,
            total_quantity=total_qty,
            total_price=round(total_price, 2),
        )

    def add_item(
        self,
        user_id: str,
        product_id: str | None,
        quantity: int = 1,
    ) -> list[CartItem]:
        """
        Add a product to the user's cart.

        Rules:
          - product_id is required and must exist in the catalog
          - quantity must be >= 1
          - adding a product already in the cart increments its quantity
          - name/price are copied from the product on first add
        """
        if not product_id:
            raise ValidationError("Product ID is required")
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        product = self.product_service.get_product(product_id)

        with self.cart_repo.locked(user_id):
            existing = self.cart_repo.get_item_by_product(user_id, product_id)
            if existing:
                existing.quantity += quantity
            else:
                self.cart_repo.append(
                    user_id,
                    CartItem(
                        product_id=product.id,
                        name=product.name,
                        price=product.price,
                        quantity=quantity,
                    ),
                )
            return snapshot(self.cart_repo.list_for_user(user_id))

    def update_quantity(
        self,
        user_id: str,
        item_id: str,
        quantity: int,
    ) -> list[CartItem]:
        """
        Set the quantity of a cart item.

        quantity <= 0 removes the item.
        """
        with self.cart_repo.locked(user_id):
            if not self.cart_repo.has_cart(user_id):
                raise NotFoundError("Cart not found")

            item = self.cart_repo.get_item(user_id, item_id)
            if not item:
                raise NotFoundError("Cart item not found")

            if quantity <= 0:
                self.cart_repo.delete(user_id, item_id)
            else:
                item.quantity = quantity

            return snapshot(self.cart_repo.list_for_user(user_id))

    def remove_item(self, user_id: str, item_id: str) -> list[CartItem]:
        """
        Remove an item from the cart (if present),
        and return the updated cart.
        """
        with self.cart_repo.locked(user_id):
            if not self.cart_repo.has_cart(user_id):
                raise NotFoundError("Cart not found")

            self.cart_repo.delete(user_id, item_id)
            return snapshot(self.cart_repo.list_for_user(user_id))

    def clear_cart(self, user_id: str) -> list[CartItem]:
        with self.cart_repo.locked(user_id):
            self.cart_repo.clear_user_cart(user_id)
            return []
