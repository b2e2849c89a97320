# storefront/repositories/cart_repo.py
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator

from storefront.models.cart import CartItem


class CartRepository:
    """
    In-memory cart storage: user_id -> ordered list of CartItem.

    Callers that read-modify-write a cart must hold `locked(user_id)`
    for the whole operation. Different users never share a lock.

    Locks are only kept while someone holds or waits on them, so
    lookups for unknown users leave nothing behind.
    """

    def __init__(self):
        self._carts: dict[str, list[CartItem]] = {}
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    # ---- locking ----

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock

    @contextmanager
    def locked(self, user_id: str) -> Iterator[None]:
        # the local reference keeps the registry entry alive until release
        lock = self._lock_for(user_id)
        with lock:
            yield

    def lock_count(self) -> int:
        return len(self._locks)

    # ---- queries ----

    def has_cart(self, user_id: str) -> bool:
        return user_id in self._carts

    def list_for_user(self, user_id: str) -> list[CartItem]:
        return self._carts.get(user_id, [])

    def get_item(self, user_id: str, item_id: str) -> CartItem | None:
        for item in self.list_for_user(user_id):
            if item.id == item_id:
                return item
        return None

    def get_item_by_product(self, user_id: str, product_id: str) -> CartItem | None:
        for item in self.list_for_user(user_id):
            if item.product_id == product_id:
                return item
        return None

    # ---- mutations ----

    def ensure_cart(self, user_id: str) -> list[CartItem]:
        return self._carts.setdefault(user_id, [])

    def append(self, user_id: str, item: CartItem) -> CartItem:
        self.ensure_cart(user_id).append(item)
        return item

    def delete(self, user_id: str, item_id: str) -> None:
        self._carts[user_id] = [
            item for item in self.list_for_user(user_id) if item.id != item_id
        ]

    def clear_user_cart(self, user_id: str) -> None:
        self._carts[user_id] = []
