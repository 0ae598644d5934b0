import os

# Cheap hashes for tests; must be set before config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.approval_engine import ApprovalEngine
from services.expense_ledger import ExpenseLedger
from services.identity_store import IdentityStore


@pytest.fixture
def identity():
    return IdentityStore()


@pytest.fixture
def ledger():
    return ExpenseLedger()


@pytest.fixture
def engine(identity, ledger):
    return ApprovalEngine(identity, ledger)


@pytest.fixture
def company(identity):
    return identity.create_company("Acme", "Poland")


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def signup(client, email="a@co.com", password="pw1", name="Alice", country=None):
    body = {"email": email, "password": password, "name": name}
    if country is not None:
        body["country"] = country
    return client.post("/api/auth/signup", json=body)


def login(client, email, password):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def create_user(client, admin_token, email, password, name="Bob", role=None, manager_id=None):
    body = {"email": email, "password": password, "name": name}
    if role is not None:
        body["role"] = role
    if manager_id is not None:
        body["managerId"] = manager_id
    return client.post("/api/users", json=body, headers=auth(admin_token))


@pytest.fixture
def admin_token(client):
    return signup(client).json()["token"]


@pytest.fixture
def employee_token(client, admin_token):
    assert create_user(client, admin_token, "e@co.com", "pw2", name="Eve").status_code == 201
    return login(client, "e@co.com", "pw2").json()["token"]


@pytest.fixture
def manager_token(client, admin_token):
    assert create_user(client, admin_token, "m@co.com", "pw3", name="Max", role="manager").status_code == 201
    return login(client, "m@co.com", "pw3").json()["token"]
