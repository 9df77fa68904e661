# cafenet/services/cart_service.py
from dataclasses import dataclass, replace
from typing import Tuple

from cafenet.domain.schemas import CheckoutItem, Product


@dataclass(frozen=True)
class CartLine:
    product_id: int | str
    title: str
    unit_price: int  # najmniejsza jednostka waluty
    quantity: int = 1

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError("Ilosc musi byc wieksza niz 0")


@dataclass(frozen=True)
class Cart:
    lines: Tuple[CartLine, ...] = ()

    def is_empty(self) -> bool:
        return not self.lines


def add_item(cart: Cart, product: Product) -> Cart:
    """Jedna linia na product_id: istniejaca dostaje +1, nowa idzie na koniec."""
    for idx, line in enumerate(cart.lines):
        if line.product_id == product.id:
            bumped = replace(line, quantity=line.quantity + 1)
            return Cart(cart.lines[:idx] + (bumped,) + cart.lines[idx + 1:])

    return Cart(cart.lines + (CartLine(product.id, product.title, product.price, 1),))


def line_subtotal(line: CartLine) -> int:
    return line.unit_price * line.quantity


def total(cart: Cart) -> int:
    return sum(line_subtotal(line) for line in cart.lines)


def to_checkout_items(cart: Cart) -> Tuple[CheckoutItem, ...]:
    return tuple(CheckoutItem(product_id=line.product_id, quantity=line.quantity) for line in cart.lines)


def clear(cart: Cart) -> Cart:
    return Cart()


def without(cart: Cart, submitted: Cart) -> Cart:
    """
    Odejmuje juz wyslany snapshot od koszyka.
    Zostaje tylko to, co dodano po zrobieniu snapshotu.
    """
    sent = {line.product_id: line.quantity for line in submitted.lines}
    remaining = []
    for line in cart.lines:
        left = line.quantity - sent.get(line.product_id, 0)
        if left > 0:
            remaining.append(replace(line, quantity=left))
    return Cart(tuple(remaining))
