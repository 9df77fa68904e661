# cafenet/api/deps.py
from fastapi import Depends, HTTPException, Request

from cafenet.domain.errors import AuthError, CafenetError, NetworkError, ServerError, StorageError, ValidationError
from cafenet.domain.schemas import Role, Session
from cafenet.repos.cart_repo import CartRepo
from cafenet.services.access_guard import DenyRedirect, authorize
from cafenet.services.api_client import CafenetClient
from cafenet.services.session_store import SessionStore


class RedirectRequired(Exception):
    def __init__(self, target: str):
        self.target = target


def get_client(request: Request) -> CafenetClient:
    return request.app.state.client


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_cart_repo(request: Request) -> CartRepo:
    return request.app.state.cart_repo


def require_roles(*roles: Role):
    def dependency(store: SessionStore = Depends(get_session_store)) -> Session:
        decision = authorize(store.load(), roles)
        if isinstance(decision, DenyRedirect):
            raise RedirectRequired(decision.target)
        return decision.session

    return dependency


def http_error(e: CafenetError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, AuthError):
        return HTTPException(status_code=401, detail=str(e))
    if isinstance(e, NetworkError):
        return HTTPException(status_code=503, detail="Backend unreachable")
    if isinstance(e, StorageError):
        return HTTPException(status_code=503, detail="Session storage unavailable")
    if isinstance(e, ServerError):
        return HTTPException(status_code=502, detail=f"Backend error ({e.status})")
    return HTTPException(status_code=500, detail=str(e))
