# cafenet/api/routers/staff.py
from fastapi import APIRouter, Depends

from cafenet.api.deps import get_client, http_error, require_roles
from cafenet.domain.errors import CafenetError
from cafenet.domain.schemas import BillingIn, Package, Role, Session
from cafenet.services.api_client import CafenetClient
from cafenet.services.billing_service import BillingService
from cafenet.utils.settings import DEFAULT_BILLING_HOURS

router = APIRouter(prefix="/staff", tags=["staff"])


@router.get("")
def staff_dashboard(
    session: Session = Depends(require_roles(Role.STAFF)),
    client: CafenetClient = Depends(get_client),
):
    svc = BillingService(client)
    try:
        customers = svc.customers()
        rooms = svc.available_rooms()
    except CafenetError as e:
        raise http_error(e)

    return {
        "user": session.model_dump(mode="json"),
        "customers": [c.model_dump() for c in customers],
        "available_rooms": [r.model_dump(mode="json") for r in rooms],
        "defaults": {"package": Package.REGULAR.value, "duration_hours": DEFAULT_BILLING_HOURS},
    }


@router.post("/billing", status_code=201)
def create_billing(
    payload: BillingIn,
    session: Session = Depends(require_roles(Role.STAFF)),
    client: CafenetClient = Depends(get_client),
):
    try:
        receipt = BillingService(client).create_billing(payload)
    except CafenetError as e:
        raise http_error(e)
    return {"message": "Billing created", "billing": receipt.model_dump(mode="json")}
