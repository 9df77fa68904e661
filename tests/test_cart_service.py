import pytest

from cafenet.domain.schemas import CheckoutItem, Product
from cafenet.services.cart_service import (
    Cart,
    CartLine,
    add_item,
    clear,
    line_subtotal,
    to_checkout_items,
    total,
    without,
)


def product(pid, price, title=None):
    return Product(id=pid, title=title or f"P{pid}", price=price)


def test_adding_existing_product_bumps_quantity():
    cart = Cart((CartLine(1, "Nasi Goreng", 15000, 1),))
    cart = add_item(cart, product(1, 15000, "Nasi Goreng"))

    assert cart.lines == (CartLine(1, "Nasi Goreng", 15000, 2),)
    assert total(cart) == 30000


def test_adding_new_product_appends_with_quantity_one(nasi_goreng, es_teh):
    cart = add_item(add_item(Cart(), nasi_goreng), es_teh)

    assert [line.product_id for line in cart.lines] == [1, 2]
    assert all(line.quantity == 1 for line in cart.lines)


def test_merge_keeps_other_lines_and_order():
    cart = Cart()
    for pid in (1, 2, 3):
        cart = add_item(cart, product(pid, 1000 * pid))
    cart = add_item(cart, product(2, 2000))

    assert [(line.product_id, line.quantity) for line in cart.lines] == [(1, 1), (2, 2), (3, 1)]


def test_add_item_does_not_mutate_input(nasi_goreng):
    cart = add_item(Cart(), nasi_goreng)
    add_item(cart, nasi_goreng)
    assert cart.lines[0].quantity == 1


@pytest.mark.parametrize(
    "sequence",
    [
        [1],
        [1, 1],
        [1, 2, 1, 3, 3, 3],
        [5, 4, 3, 2, 1, 1, 2, 3, 4, 5],
        [7] * 20,
    ],
)
def test_total_grows_by_price_and_lines_stay_distinct(sequence):
    prices = {pid: 1000 + pid * 250 for pid in set(sequence)}
    cart = Cart()
    for pid in sequence:
        before = total(cart)
        cart = add_item(cart, product(pid, prices[pid]))
        assert total(cart) == before + prices[pid]

    items = to_checkout_items(cart)
    assert len(items) == len(set(sequence))
    assert [i.product_id for i in items] == list(dict.fromkeys(sequence))
    assert sum(i.quantity for i in items) == len(sequence)


def test_total_is_exact_for_large_amounts():
    cart = Cart((CartLine(1, "Paket", 10**9, 1000), CartLine(2, "Snack", 999_999_999, 3)))
    assert total(cart) == 10**12 + 2_999_999_997


def test_to_checkout_items_shape(nasi_goreng):
    cart = add_item(add_item(Cart(), nasi_goreng), nasi_goreng)
    assert to_checkout_items(cart) == (CheckoutItem(product_id=1, quantity=2),)


def test_clear_returns_empty_cart(nasi_goreng):
    emptied = clear(add_item(Cart(), nasi_goreng))
    assert emptied.is_empty()
    assert total(emptied) == 0
    assert to_checkout_items(emptied) == ()


def test_cart_line_rejects_zero_quantity():
    with pytest.raises(ValueError):
        CartLine(1, "x", 100, 0)


def test_line_subtotal():
    assert line_subtotal(CartLine(1, "x", 2500, 4)) == 10000


def test_without_removes_submitted_snapshot_only(nasi_goreng, es_teh):
    snapshot = add_item(Cart(), nasi_goreng)
    current = add_item(add_item(snapshot, nasi_goreng), es_teh)

    remaining = without(current, snapshot)

    assert [(line.product_id, line.quantity) for line in remaining.lines] == [(1, 1), (2, 1)]
    assert without(snapshot, snapshot).is_empty()
