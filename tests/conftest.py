from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from cafenet.api import create_app
from cafenet.domain.schemas import Product, Role, Session
from cafenet.repos.cart_repo import CartRepo
from cafenet.services.api_client import CafenetClient
from cafenet.services.session_store import FileStorage, SessionStore


@pytest.fixture
def make_response():
    return _response


def _response(status_code=200, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(http):
    return CafenetClient(base_url="http://backend.test/", timeout=5, http=http)


@pytest.fixture
def store(tmp_path):
    return SessionStore(FileStorage(str(tmp_path)), key="aradabiya_user")


@pytest.fixture
def admin():
    return Session(id=1, name="Ayu", role=Role.ADMIN)


@pytest.fixture
def staff():
    return Session(id=2, name="Budi", role=Role.STAFF)


@pytest.fixture
def customer():
    return Session(id=7, name="Citra", role=Role.CUSTOMER)


@pytest.fixture
def nasi_goreng():
    return Product(id=1, title="Nasi Goreng", price=15000, image="https://img.test/ng", category="makanan")


@pytest.fixture
def es_teh():
    return Product(id=2, title="Es Teh", price=5000, image="https://img.test/et", category="minuman")


@pytest.fixture
def backend():
    return MagicMock(spec=CafenetClient)


@pytest.fixture
def app(backend, store):
    return create_app(client=backend, session_store=store, cart_repo=CartRepo())


@pytest.fixture
def web(app):
    return TestClient(app)
