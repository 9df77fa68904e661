# cafenet/services/api_client.py
from typing import Any, List, Sequence

import requests
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError
from requests import RequestException

from cafenet.domain.errors import AuthError, NetworkError, ServerError, ValidationError
from cafenet.domain.schemas import (
    AdminOverview,
    BillingReceipt,
    BillingSnapshot,
    Category,
    CheckoutItem,
    CheckoutResult,
    Package,
    Product,
    Role,
    Room,
    Session,
    UserSummary,
)
from cafenet.utils.settings import BACKEND_URL, HTTP_TIMEOUT_SECONDS
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)


class CafenetClient:
    """
    Klient HTTP do backendu Cafenet.
    Kazde wywolanie to jeden request (bez retry i cache), z timeoutem.
    Bledy: NetworkError (brak odpowiedzi), ServerError(status) (non-2xx
    albo zly body), ValidationError (odrzucone przed wyslaniem).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http: requests.Session | None = None,
    ):
        self.base_url = (base_url or BACKEND_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT_SECONDS
        self.http = http or requests.Session()

    def _request(self, method: str, path: str, schema, *, params: dict | None = None, json: Any = None):
        url = f"{self.base_url}{path}"
        logger.info(f"CafenetClient {method} {url}")

        try:
            resp = self.http.request(method, url, params=params, json=json, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"CafenetClient {method} {url} failed: {e}")
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning(f"CafenetClient {method} {url} -> {resp.status_code}")
            raise ServerError(resp.status_code, resp.text[:200])

        try:
            data = resp.json()
        except ValueError as e:
            raise ServerError(resp.status_code, "response is not valid JSON") from e

        try:
            if isinstance(schema, type) and issubclass(schema, BaseModel):
                return schema.model_validate(data)
            return TypeAdapter(schema).validate_python(data)
        except SchemaError as e:
            raise ServerError(resp.status_code, f"unexpected response shape: {e.error_count()} error(s)") from e

    # auth

    def login(self, username: str, password: str) -> Session:
        try:
            session = self._request("POST", "/auth/login", Session, json={"username": username, "password": password})
        except ServerError as e:
            if 200 <= e.status < 300:
                raise
            # szczegoly z serwera tylko do logu, userowi generyczny komunikat
            logger.warning(f"Login rejected for {username!r}: status {e.status}")
            raise AuthError() from e
        return session

    # queries

    def list_users(self, role: Role | str) -> List[UserSummary]:
        return self._request("GET", "/users", List[UserSummary], params={"role": Role(role).value})

    def list_rooms(self) -> List[Room]:
        return self._request("GET", "/rooms", List[Room])

    def list_billing(self, customer_id: int | str, active_only: bool = True) -> List[BillingSnapshot]:
        params = {"customer_id": customer_id, "active": "true" if active_only else "false"}
        return self._request("GET", "/billing", List[BillingSnapshot], params=params)

    def list_products(self, category: Category | str) -> List[Product]:
        try:
            category = Category(category)
        except ValueError as e:
            raise ValidationError(f"Unknown product category: {category!r}") from e
        return self._request("GET", "/products", List[Product], params={"category": category.value})

    def admin_overview(self) -> AdminOverview:
        return self._request("GET", "/admin/overview", AdminOverview)

    # commands

    def create_billing(
        self,
        customer_id: int | str | None,
        room_id: int | str | None,
        package: Package | str,
        duration_hours: int,
    ) -> BillingReceipt:
        if customer_id in (None, ""):
            raise ValidationError("Customer must be selected")
        if room_id in (None, ""):
            raise ValidationError("Room must be selected")
        try:
            package = Package(package)
        except ValueError as e:
            raise ValidationError(f"Unknown package: {package!r}") from e
        if isinstance(duration_hours, bool) or not isinstance(duration_hours, int):
            raise ValidationError("Duration must be a whole number of hours")
        if duration_hours < 1:
            raise ValidationError("Duration must be at least 1 hour")

        payload = {
            "customer_id": customer_id,
            "room_id": room_id,
            "package": package.value,
            "duration_hours": duration_hours,
        }
        return self._request("POST", "/billing", BillingReceipt, json=payload)

    def checkout(self, customer_id: int | str, items: Sequence[CheckoutItem]) -> CheckoutResult:
        # snapshot payloadu zanim cokolwiek pojdzie w siec
        payload_items = [item.model_dump(by_alias=True) for item in items]
        if not payload_items:
            raise ValidationError("Cart is empty")

        payload = {"customer_id": customer_id, "items": payload_items}
        return self._request("POST", "/checkout", CheckoutResult, json=payload)
