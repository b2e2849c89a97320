# storefront/services/order_service.py
import logging

from storefront.core.errors import ValidationError
from storefront.models.order import Order
from storefront.repositories.cart_repo import CartRepository
from storefront.services.cart_service import snapshot

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business logic for checkout.

    Responsibilities:
      - refuse to check out a missing or empty cart
      - compute the order total from the cart snapshot
      - clear the cart in the same locked step that builds the order

    Orders are returned to the caller and not kept.
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    def checkout(self, user_id: str) -> Order:
        """
        Convert the user's cart into a confirmed Order.

        Steps:
          1. Load cart; error if missing or empty.
          2. Snapshot items and compute total.
          3. Clear cart.
        """
        with self.cart_repo.locked(user_id):
            # 1) Load cart
            cart_items = self.cart_repo.list_for_user(user_id)
            if not cart_items:
                raise ValidationError("Cart is empty")

            # 2) Snapshot and total
            items = snapshot(cart_items)
            total = 0.0
            for it in items:
                total += it.line_total

            order = Order(
                user_id=user_id,
                items=items,
                total=round(total, 2),
            )

            # 3) Clear cart
            self.cart_repo.clear_user_cart(user_id)

        logger.info(
            f"Order {order.id} confirmed for user {user_id}: "
            f"{len(order.items)} item(s), total {order.total:.2f}"
        )
        return order
