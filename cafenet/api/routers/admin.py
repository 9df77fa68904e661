# cafenet/api/routers/admin.py
from fastapi import APIRouter, Depends

from cafenet.api.deps import get_client, http_error, require_roles
from cafenet.domain.errors import CafenetError
from cafenet.domain.schemas import Role, Session
from cafenet.services.admin_service import AdminService
from cafenet.services.api_client import CafenetClient

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("")
def admin_dashboard(
    session: Session = Depends(require_roles(Role.ADMIN)),
    client: CafenetClient = Depends(get_client),
):
    try:
        overview = AdminService(client).overview()
    except CafenetError as e:
        raise http_error(e)
    return {"user": session.model_dump(mode="json"), **overview}
