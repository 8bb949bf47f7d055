"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from pos_checkout.core.dependencies import get_clock
from pos_checkout.database import account_db, cart_db, catalog_db, demo_items
from pos_checkout.main import app


@pytest.fixture
def client(clock, now):
    catalog_db.reset(demo_items(now.date()))
    account_db.reset()
    cart_db.reset()
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def _new_cart(client):
    response = client.post("/api/cart")
    assert response.status_code == 200
    return response.json()["cart_id"]


class TestItems:
    def test_list_items(self, client):
        response = client.get("/api/items")
        assert response.status_code == 200
        assert [i["name"] for i in response.json()][:2] == ["Cheese", "Biscuits"]

    def test_get_item(self, client):
        body = client.get("/api/items/TV").json()
        assert body["weight"] == 7.0
        assert body["expiry"] is None

    def test_unknown_item(self, client):
        assert client.get("/api/items/Nope").status_code == 404


class TestCart:
    def test_add_accumulates(self, client):
        cart_id = _new_cart(client)
        client.post(f"/api/cart/{cart_id}/items", json={"item_name": "Cheese", "quantity": 2})
        response = client.post(
            f"/api/cart/{cart_id}/items", json={"item_name": "Cheese", "quantity": 1}
        )

        assert response.status_code == 200
        line = response.json()["lines"][0]
        assert line["quantity"] == 3
        assert line["line_total"] == 300

    def test_invalid_quantity(self, client):
        cart_id = _new_cart(client)
        response = client.post(f"/api/cart/{cart_id}/items", json={"item_name": "TV", "quantity": 0})
        assert response.status_code == 400
        assert response.json()["detail"] == "Quantity must be positive"

    def test_insufficient_stock(self, client):
        cart_id = _new_cart(client)
        response = client.post(
            f"/api/cart/{cart_id}/items", json={"item_name": "Cheese", "quantity": 10}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Not enough stock for Cheese"

    def test_unknown_cart(self, client):
        assert client.get("/api/cart/missing").status_code == 404

    def test_unknown_item(self, client):
        cart_id = _new_cart(client)
        response = client.post(f"/api/cart/{cart_id}/items", json={"item_name": "Nope"})
        assert response.status_code == 404


class TestCheckout:
    def test_checkout(self, client):
        cart_id = _new_cart(client)
        client.post(f"/api/cart/{cart_id}/items", json={"item_name": "Cheese", "quantity": 2})
        client.post(f"/api/cart/{cart_id}/items", json={"item_name": "Mobile", "quantity": 1})

        response = client.post("/api/checkout", json={"cart_id": cart_id, "customer": "Ali"})

        assert response.status_code == 200
        report = response.json()
        assert report["success"] is True
        assert report["receipt"]["total"] == 424
        assert report["receipt"]["balance"] == 576
        assert report["shipping_notice_text"].startswith("** Shipment notice **")
        assert catalog_db.get_item("Cheese").available_quantity == 3
        assert client.get(f"/api/cart/{cart_id}").json()["lines"] == []

    def test_failure_reported_in_body(self, client):
        cart_id = _new_cart(client)

        response = client.post("/api/checkout", json={"cart_id": cart_id, "customer": "Ali"})

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["outcome"] == "empty_cart"

    def test_unknown_customer(self, client):
        cart_id = _new_cart(client)
        response = client.post("/api/checkout", json={"cart_id": cart_id, "customer": "Nobody"})
        assert response.status_code == 404


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


class TestNewCart:
    def test_empty_cart_is_found(self, client):
        cart_id = _new_cart(client)

        response = client.get(f"/api/cart/{cart_id}")

        assert response.status_code == 200
        assert response.json()["lines"] == []

    def test_first_item_can_be_added(self, client):
        cart_id = _new_cart(client)

        response = client.post(f"/api/cart/{cart_id}/items", json={"item_name": "TV"})

        assert response.status_code == 200
        assert response.json()["lines"][0]["quantity"] == 1
