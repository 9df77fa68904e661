# cafenet/repos/cart_repo.py
from threading import Lock
from typing import Callable, Dict, Tuple

from cafenet.services.cart_service import Cart


class CartRepo:
    """
    Koszyki tylko w pamieci procesu, per customer_id. Restart = pusty koszyk.
    Kazdy koszyk ma wersje: delete_cart ja podbija (nowy koszyk), zeby
    update_cart_version mogl odrzucic zmiane liczona na starym koszyku.
    """

    def __init__(self):
        self._carts: Dict[str, Cart] = {}
        self._versions: Dict[str, int] = {}
        self._lock = Lock()

    def get_cart(self, customer_id: int | str) -> Cart:
        with self._lock:
            return self._carts.get(str(customer_id), Cart())

    def get_cart_with_version(self, customer_id: int | str) -> Tuple[Cart, int]:
        key = str(customer_id)
        with self._lock:
            return self._carts.get(key, Cart()), self._versions.get(key, 0)

    def _store(self, key: str, cart: Cart) -> None:
        if cart.is_empty():
            self._carts.pop(key, None)
        else:
            self._carts[key] = cart

    def update_cart(self, customer_id: int | str, fn: Callable[[Cart], Cart]) -> Cart:
        # read-modify-write pod jednym lockiem
        key = str(customer_id)
        with self._lock:
            updated = fn(self._carts.get(key, Cart()))
            self._store(key, updated)
            return updated

    def update_cart_version(self, customer_id: int | str, old_version: int, fn: Callable[[Cart], Cart]) -> bool:
        """Optimistic locking: zmiana tylko gdy koszyk nie zostal w miedzyczasie wyczyszczony."""
        key = str(customer_id)
        with self._lock:
            if self._versions.get(key, 0) != old_version:
                return False
            self._store(key, fn(self._carts.get(key, Cart())))
            return True

    def delete_cart(self, customer_id: int | str) -> None:
        key = str(customer_id)
        with self._lock:
            self._carts.pop(key, None)
            self._versions[key] = self._versions.get(key, 0) + 1
