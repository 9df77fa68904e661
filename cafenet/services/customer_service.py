# cafenet/services/customer_service.py
from typing import List

from cafenet.domain.errors import ValidationError
from cafenet.domain.schemas import BillingSnapshot, Category, CheckoutResult, Product, Session
from cafenet.repos.cart_repo import CartRepo
from cafenet.services import cart_service
from cafenet.services.api_client import CafenetClient
from cafenet.services.cart_service import Cart
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)


class CustomerService:
    """
    Use case'y ekranu customera: status billingu, sklep, koszyk, checkout.
    Sesja przychodzi z zewnatrz (guard), serwis nie czyta storage.
    """

    def __init__(self, client: CafenetClient, cart_repo: CartRepo):
        self.client = client
        self.cart_repo = cart_repo

    # query
    def active_billing(self, session: Session) -> BillingSnapshot | None:
        snapshots = self.client.list_billing(session.id, active_only=True)
        return snapshots[0] if snapshots else None

    def products(self, category: Category | str) -> List[Product]:
        return self.client.list_products(category)

    def get_cart(self, session: Session) -> Cart:
        return self.cart_repo.get_cart(session.id)

    # commands
    def add_to_cart(self, session: Session, product_id: int | str, category: Category | str) -> Cart:
        """
        Produkt szukany w aktualnej liscie kategorii z backendu,
        cena i tytul zawsze z tej listy, nie od klienta.
        """
        product = next(
            (p for p in self.client.list_products(category) if str(p.id) == str(product_id)),
            None,
        )
        if product is None:
            raise ValidationError(f"Product {product_id} not found in category {category}")

        cart = self.cart_repo.update_cart(session.id, lambda c: cart_service.add_item(c, product))
        logger.info(f"Produkt {product.id} dodany do koszyka customera {session.id}")
        return cart

    def clear_cart(self, session: Session) -> Cart:
        self.cart_repo.delete_cart(session.id)
        logger.info(f"Koszyk customera {session.id} wyczyszczony")
        return Cart()

    def checkout(self, session: Session) -> CheckoutResult:
        # snapshot przed requestem: pozniejsze add_to_cart nie zmienia wyslanego payloadu
        snapshot, version = self.cart_repo.get_cart_with_version(session.id)
        if snapshot.is_empty():
            raise ValidationError("Cart is empty")

        items = cart_service.to_checkout_items(snapshot)
        logger.info(f"Checkout customera {session.id}: {len(items)} pozycji, total {cart_service.total(snapshot)}")

        result = self.client.checkout(session.id, items)

        # usun dokladnie to co zostalo kupione, reszta (dodana w trakcie) zostaje;
        # koszyk wyczyszczony w trakcie to nowy koszyk, nie ruszamy go
        applied = self.cart_repo.update_cart_version(
            session.id, version, lambda c: cart_service.without(c, snapshot)
        )
        if not applied:
            logger.info(f"Koszyk customera {session.id} wyczyszczony w trakcie checkoutu, zostaje bez zmian")
        logger.info(f"Checkout customera {session.id} zakonczony, kod {result.payment_code}")
        return result
