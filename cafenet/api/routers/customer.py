# cafenet/api/routers/customer.py
from fastapi import APIRouter, Depends, Query

from cafenet.api.deps import get_cart_repo, get_client, http_error, require_roles
from cafenet.domain.errors import CafenetError
from cafenet.domain.schemas import CartItemIn, Category, Role, Session
from cafenet.repos.cart_repo import CartRepo
from cafenet.services import cart_service
from cafenet.services.api_client import CafenetClient
from cafenet.services.cart_service import Cart
from cafenet.services.customer_service import CustomerService
from cafenet.utils.formatters import format_money

router = APIRouter(prefix="/customer", tags=["customer"])


def get_service(
    client: CafenetClient = Depends(get_client),
    cart_repo: CartRepo = Depends(get_cart_repo),
) -> CustomerService:
    return CustomerService(client, cart_repo)


def cart_view(cart: Cart) -> dict:
    total = cart_service.total(cart)
    return {
        "lines": [
            {
                "product_id": line.product_id,
                "title": line.title,
                "unit_price": line.unit_price,
                "quantity": line.quantity,
                "subtotal": cart_service.line_subtotal(line),
                "subtotal_display": format_money(cart_service.line_subtotal(line)),
            }
            for line in cart.lines
        ],
        "total": total,
        "total_display": format_money(total),
    }


@router.get("")
def customer_dashboard(
    category: Category = Query(Category.MAKANAN),
    session: Session = Depends(require_roles(Role.CUSTOMER)),
    svc: CustomerService = Depends(get_service),
):
    try:
        billing = svc.active_billing(session)
        products = svc.products(category)
    except CafenetError as e:
        raise http_error(e)

    return {
        "user": session.model_dump(mode="json"),
        "billing": billing.model_dump(mode="json") if billing else None,
        "category": category.value,
        "categories": [c.value for c in Category],
        "products": [
            {**p.model_dump(mode="json"), "price_display": format_money(p.price)}
            for p in products
        ],
        "cart": cart_view(svc.get_cart(session)),
    }


@router.post("/cart")
def add_to_cart(
    payload: CartItemIn,
    session: Session = Depends(require_roles(Role.CUSTOMER)),
    svc: CustomerService = Depends(get_service),
):
    try:
        cart = svc.add_to_cart(session, payload.product_id, payload.category)
    except CafenetError as e:
        raise http_error(e)
    return cart_view(cart)


@router.delete("/cart")
def clear_cart(
    session: Session = Depends(require_roles(Role.CUSTOMER)),
    svc: CustomerService = Depends(get_service),
):
    return cart_view(svc.clear_cart(session))


@router.post("/checkout")
def checkout(
    session: Session = Depends(require_roles(Role.CUSTOMER)),
    svc: CustomerService = Depends(get_service),
):
    try:
        result = svc.checkout(session)
    except CafenetError as e:
        raise http_error(e)
    return {
        "payment_code": result.payment_code,
        "total": result.total,
        "total_display": format_money(result.total),
    }
