# cafenet/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from cafenet.api.deps import get_client, get_session_store, http_error
from cafenet.domain.errors import AuthError, CafenetError, NetworkError, StorageError
from cafenet.domain.schemas import LoginIn
from cafenet.services.access_guard import LOGIN_ROUTE, landing_route
from cafenet.services.api_client import CafenetClient
from cafenet.services.session_store import SessionStore
from cafenet.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])

LOGIN_FAILED = "Invalid username or password"


@router.get("/")
def home(store: SessionStore = Depends(get_session_store)):
    session = store.load()
    return {
        "brand": "Aradabiya",
        "tagline": "Cafenet Management",
        "next": landing_route(session.role) if session else LOGIN_ROUTE,
    }


@router.get("/login")
def login_form():
    return {"message": "Sign in to manage Aradabiya", "fields": ["username", "password"]}


@router.post("/login")
def login(
    payload: LoginIn,
    client: CafenetClient = Depends(get_client),
    store: SessionStore = Depends(get_session_store),
):
    try:
        session = client.login(payload.username, payload.password)
    except CafenetError as e:
        # jeden komunikat dla usera, szczegoly tylko w logu
        logger.warning(f"Login failed for {payload.username!r}: {e!r}")
        status = 401 if isinstance(e, AuthError) else 503 if isinstance(e, NetworkError) else 502
        raise HTTPException(status_code=status, detail=LOGIN_FAILED)

    try:
        store.save(session)
    except StorageError as e:
        logger.error(f"Login ok for {payload.username!r} but session not stored: {e}")
        raise http_error(e)
    return RedirectResponse(landing_route(session.role), status_code=303)


@router.post("/logout")
def logout(store: SessionStore = Depends(get_session_store)):
    try:
        store.clear()
    except StorageError as e:
        raise http_error(e)
    return RedirectResponse(LOGIN_ROUTE, status_code=303)
