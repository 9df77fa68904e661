# cafenet/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from cafenet.api.deps import RedirectRequired
from cafenet.api.routers import admin, auth, customer, health, staff
from cafenet.repos.cart_repo import CartRepo
from cafenet.services.api_client import CafenetClient
from cafenet.services.session_store import SessionStore, build_session_store


def create_app(
    client: CafenetClient | None = None,
    session_store: SessionStore | None = None,
    cart_repo: CartRepo | None = None,
) -> FastAPI:
    app = FastAPI(title="Aradabiya Cafenet", version="1.0.0")

    app.state.client = client or CafenetClient()
    app.state.session_store = session_store or build_session_store()
    app.state.cart_repo = cart_repo or CartRepo()

    @app.exception_handler(RedirectRequired)
    def redirect_to_login(request: Request, exc: RedirectRequired):
        return RedirectResponse(exc.target, status_code=303)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(admin.router)
    app.include_router(staff.router)
    app.include_router(customer.router)

    return app
