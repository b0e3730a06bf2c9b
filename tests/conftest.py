# tests/conftest.py
import os
import tempfile

# must be set before shopapp is imported: the engine is built at import time
_TMP_DIR = tempfile.mkdtemp(prefix="shopapp-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["API_PREFIX"] = "/api/v1"

import pytest
from fastapi.testclient import TestClient

from shopapp.database.session import Base, SessionLocal, engine, init_db
from shopapp.main import app
from shopapp.models import Category, Product, User
from shopapp.services.user_service import hash_password

API = "/api/v1"
USER_ROLE_ID = 1
ADMIN_ROLE_ID = 2


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def register(client, phone="0900000001", password="secret1", role_id=USER_ROLE_ID, **extra):
    body = {
        "fullname": "Test User",
        "phone_number": phone,
        "address": "1 Main St",
        "password": password,
        "retype_password": password,
        "role_id": role_id,
    }
    body.update(extra)
    return client.post(f"{API}/users/register", json=body)


def login(client, phone="0900000001", password="secret1", role_id=USER_ROLE_ID):
    return client.post(
        f"{API}/users/login",
        json={"phone_number": phone, "password": password, "role_id": role_id},
    )


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_token(client):
    assert register(client).status_code == 200
    resp = login(client)
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def admin_token(client, db):
    # admins cannot self-register, so they are inserted directly
    db.add(User(
        fullname="Admin",
        phone_number="0999999999",
        address="HQ",
        password=hash_password("adminpass"),
        role_id=ADMIN_ROLE_ID,
        is_active=True,
    ))
    db.commit()
    resp = login(client, phone="0999999999", password="adminpass", role_id=ADMIN_ROLE_ID)
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def product(db):
    category = Category(name="Phones")
    db.add(category)
    db.flush()
    p = Product(name="Pixel", price=250.0, category_id=category.id, description="A phone")
    db.add(p)
    db.commit()
    db.refresh(p)
    return p
