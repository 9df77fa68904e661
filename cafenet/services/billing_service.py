# cafenet/services/billing_service.py
from typing import List

from cafenet.domain.schemas import BillingIn, BillingReceipt, Role, Room, UserSummary
from cafenet.services.api_client import CafenetClient
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)


class BillingService:
    """Formularz billingu dla staffu: customerzy, wolne pokoje, tworzenie billingu."""

    def __init__(self, client: CafenetClient):
        self.client = client

    def customers(self) -> List[UserSummary]:
        return self.client.list_users(Role.CUSTOMER)

    def available_rooms(self) -> List[Room]:
        return [room for room in self.client.list_rooms() if not room.is_occupied]

    def create_billing(self, form: BillingIn) -> BillingReceipt:
        receipt = self.client.create_billing(
            customer_id=form.customer_id,
            room_id=form.room_id,
            package=form.package,
            duration_hours=form.duration_hours,
        )
        logger.info(
            f"Billing utworzony: customer {form.customer_id}, room {form.room_id}, "
            f"{form.package.value} {form.duration_hours}h"
        )
        return receipt
