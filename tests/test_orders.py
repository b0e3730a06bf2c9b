# tests/test_orders.py
from datetime import date, timedelta
from typing import get_args

from shopapp.models import Order, OrderDetail, OrderStatus
from shopapp.schemas.orders import OrderStatusValue
from tests.conftest import API, bearer


def _order_body(product_id, **extra):
    body = {
        "user_id": 1,
        "fullname": "Test User",
        "email": "test@example.com",
        "phone_number": "0900000001",
        "address": "1 Main St",
        "note": "leave at door",
        "shipping_method": "express",
        "payment_method": "cod",
        "cart_items": [{"product_id": product_id, "quantity": 2}],
    }
    body.update(extra)
    return body


def test_create_order_defaults(client, user_token, product):
    resp = client.post(f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token))
    assert resp.status_code == 200
    order = resp.json()
    assert order["status"] == "pending"
    assert order["active"] is True
    assert order["order_date"] == date.today().isoformat()
    assert order["shipping_date"] == date.today().isoformat()
    assert order["total_money"] == 500.0
    assert len(order["order_details"]) == 1
    line = order["order_details"][0]
    assert line["price"] == 250.0
    assert line["number_of_products"] == 2
    assert line["total_money"] == 500.0


def test_create_order_rejects_past_shipping_date(client, user_token, product, db):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    resp = client.post(
        f"{API}/orders",
        json=_order_body(product.id, shipping_date=yesterday),
        headers=bearer(user_token),
    )
    assert resp.status_code == 400
    assert db.query(Order).count() == 0


def test_create_order_accepts_future_shipping_date(client, user_token, product):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    resp = client.post(
        f"{API}/orders",
        json=_order_body(product.id, shipping_date=tomorrow),
        headers=bearer(user_token),
    )
    assert resp.status_code == 200
    assert resp.json()["shipping_date"] == tomorrow


def test_create_order_requires_existing_user(client, user_token, product):
    resp = client.post(
        f"{API}/orders", json=_order_body(product.id, user_id=77), headers=bearer(user_token)
    )
    assert resp.status_code == 404


def test_unknown_product_rolls_back_whole_order(client, user_token, product, db):
    body = _order_body(product.id)
    body["cart_items"].append({"product_id": 999, "quantity": 1})
    resp = client.post(f"{API}/orders", json=body, headers=bearer(user_token))
    assert resp.status_code == 404
    assert db.query(Order).count() == 0
    assert db.query(OrderDetail).count() == 0


def test_soft_deleted_order_is_hidden_from_listings(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()

    resp = client.delete(f"{API}/orders/{order['id']}", headers=bearer(admin_token))
    assert resp.status_code == 200

    resp = client.get(f"{API}/orders/{order['id']}", headers=bearer(user_token))
    assert resp.status_code == 200
    assert resp.json()["active"] is False

    assert client.get(f"{API}/orders").json()["orders"] == []
    assert client.get(f"{API}/orders/user/1", headers=bearer(user_token)).json() == []


def test_delete_is_soft(client, user_token, admin_token, product, db):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    client.delete(f"{API}/orders/{order['id']}", headers=bearer(admin_token))
    assert db.query(Order).count() == 1
    assert db.query(OrderDetail).count() == 1


def test_update_order(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    resp = client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "status": "shipped", "tracking_number": "TRK-1"},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "shipped"
    assert resp.json()["tracking_number"] == "TRK-1"
    assert resp.json()["address"] == "1 Main St"


def test_update_order_revalidates_user(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    resp = client.put(
        f"{API}/orders/{order['id']}", json={"user_id": 55}, headers=bearer(admin_token)
    )
    assert resp.status_code == 404


def test_terminal_status_cannot_change(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "status": "cancelled"},
        headers=bearer(admin_token),
    )
    resp = client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "status": "processing"},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 400


def test_unknown_status_is_rejected(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    resp = client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "status": "lost"},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 400


def test_keyword_listing(client, user_token, product):
    client.post(f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token))
    client.post(
        f"{API}/orders",
        json=_order_body(product.id, address="99 Harbour Rd"),
        headers=bearer(user_token),
    )
    body = client.get(f"{API}/orders", params={"keyword": "Harbour"}).json()
    assert len(body["orders"]) == 1
    assert body["total_pages"] == 1


def test_get_missing_order(client, user_token):
    assert client.get(f"{API}/orders/123", headers=bearer(user_token)).status_code == 404


def test_update_rejects_shipping_date_before_order_date(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    resp = client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "shipping_date": yesterday},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 400
    assert client.get(
        f"{API}/orders/{order['id']}", headers=bearer(user_token)
    ).json()["shipping_date"] == date.today().isoformat()


def test_terminal_order_refuses_any_field_update(client, user_token, admin_token, product):
    order = client.post(
        f"{API}/orders", json=_order_body(product.id), headers=bearer(user_token)
    ).json()
    client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "status": "delivered"},
        headers=bearer(admin_token),
    )
    resp = client.put(
        f"{API}/orders/{order['id']}",
        json={"user_id": 1, "note": "rewritten"},
        headers=bearer(admin_token),
    )
    assert resp.status_code == 400
    assert client.get(
        f"{API}/orders/{order['id']}", headers=bearer(user_token)
    ).json()["note"] == "leave at door"


def test_status_schema_matches_model_statuses():
    assert get_args(OrderStatusValue) == OrderStatus.ALL
