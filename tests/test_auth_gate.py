# tests/test_auth_gate.py
from shopapp.services.token_service import TokenService
from tests.conftest import API, bearer


def test_public_routes_need_no_token(client):
    assert client.get(f"{API}/categories").status_code == 200
    assert client.get(f"{API}/products").status_code == 200
    assert client.get(f"{API}/orders").status_code == 200


def test_missing_header_is_unauthorized(client):
    resp = client.get(f"{API}/orders/1")
    assert resp.status_code == 401
    assert resp.json() == {"message": "Unauthorized"}


def test_non_bearer_header_is_unauthorized(client, user_token):
    resp = client.get(f"{API}/orders/1", headers={"Authorization": f"Token {user_token}"})
    assert resp.status_code == 401


def test_garbage_token_is_unauthorized(client):
    assert client.get(f"{API}/orders/1", headers=bearer("not-a-jwt")).status_code == 401


def test_expired_token_is_unauthorized(client, user_token):
    from types import SimpleNamespace
    expired = TokenService(secret_key="test-secret", expiration_seconds=-5).generate_token(
        SimpleNamespace(phone_number="0900000001")
    )
    assert client.post(f"{API}/users/details", headers=bearer(expired)).status_code == 401


def test_token_for_unknown_user_is_unauthorized(client):
    from types import SimpleNamespace
    token = TokenService(secret_key="test-secret").generate_token(
        SimpleNamespace(phone_number="0111111111")
    )
    assert client.post(f"{API}/users/details", headers=bearer(token)).status_code == 401


def test_wrong_role_is_forbidden(client, user_token):
    resp = client.post(f"{API}/categories", json={"name": "Laptops"}, headers=bearer(user_token))
    assert resp.status_code == 403


def test_admin_cannot_place_orders(client, admin_token):
    resp = client.post(f"{API}/orders", json={}, headers=bearer(admin_token))
    assert resp.status_code == 403


def test_routes_outside_prefix_are_not_gated(client):
    assert client.get("/health").status_code == 200
    assert client.get("/").status_code == 200
