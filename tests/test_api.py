"""HTTP surface tests using FastAPI's TestClient."""

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.domain.errors import ProductNotFound
from storefront.domain.identity import Identity
from storefront.services.order_service import OrderService


class FakeCatalog:
    def __init__(self, products):
        self.products = {p.id: p for p in products}

    def list_products(self):
        return list(self.products.values())

    def fetch_product(self, product_id):
        if product_id not in self.products:
            raise ProductNotFound(f"Product {product_id} not found")
        return self.products[product_id]


class FakeIdentities:
    def resolve(self, user_id):
        return Identity(user_id=user_id, is_admin=user_id == "root")


@pytest.fixture
def order_repo():
    repo = Mock()
    repo.create_order.return_value = {
        "id": "ord-1",
        "user_id": "alice",
        "status": "pending",
        "total_amount": "25.99",
        "shipping_address": "12 MG Road",
        "phone": "98765",
        "created_at": "2026-10-18T10:00:00+00:00",
    }
    repo.list_orders.return_value = [repo.create_order.return_value]
    return repo


@pytest.fixture
def client(store, paracetamol, amoxicillin, order_repo):
    app = create_app(
        cart_store=store,
        product_client=FakeCatalog([paracetamol, amoxicillin]),
        identity_service=FakeIdentities(),
        order_service=OrderService(order_repo),
    )
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_session_lifecycle(client):
    assert client.get("/session").json()["authenticated"] is False

    body = client.put("/session", json={"user_id": "root"}).json()
    assert body == {"user_id": "root", "is_admin": True, "authenticated": True}

    body = client.delete("/session").json()
    assert body["authenticated"] is False


def test_products(client):
    assert [p["id"] for p in client.get("/products").json()] == ["1", "2"]
    assert client.get("/products/2").json()["name"] == "Amoxicillin 250mg"
    assert client.get("/products/99").status_code == 404


def test_add_item_anonymous_is_401(client):
    resp = client.post("/cart/items", json={"product_id": "1"})

    assert resp.status_code == 401
    assert resp.json()["detail"]["title"] == "Please Sign In"
    assert client.get("/cart").json()["count"] == 0


def test_cart_flow(client, mirror):
    client.put("/session", json={"user_id": "alice"})

    client.post("/cart/items", json={"product_id": "1"})
    client.post("/cart/items", json={"product_id": "1"})
    body = client.post("/cart/items", json={"product_id": "2"}).json()

    assert body["count"] == 3
    assert Decimal(body["total"]) == Decimal("97.48")
    assert [(i["product"]["id"], i["quantity"]) for i in body["items"]] == [("1", 2), ("2", 1)]

    body = client.patch("/cart/items/1", json={"quantity": 5}).json()
    assert body["count"] == 6

    body = client.delete("/cart/items/2").json()
    assert [i["product"]["id"] for i in body["items"]] == ["1"]

    body = client.delete("/cart").json()
    assert body["items"] == []
    assert mirror.calls[-1] == ("clear", "alice")


def test_add_unknown_product_is_404(client):
    client.put("/session", json={"user_id": "alice"})
    assert client.post("/cart/items", json={"product_id": "99"}).status_code == 404


def test_cart_survives_sign_out_and_back(client):
    client.put("/session", json={"user_id": "alice"})
    client.post("/cart/items", json={"product_id": "1"})

    client.delete("/session")
    assert client.get("/cart").json()["items"] == []

    client.put("/session", json={"user_id": "alice"})
    assert client.get("/cart").json()["count"] == 1


def test_checkout(client, order_repo):
    client.put("/session", json={"user_id": "alice"})
    client.post("/cart/items", json={"product_id": "1"})

    resp = client.post("/orders", json={"name": "Asha", "phone": "98765", "address": "12 MG Road"})

    assert resp.status_code == 201
    assert resp.json()["id"] == "ord-1"
    assert client.get("/cart").json()["count"] == 0
    order_repo.add_order_items.assert_called_once()


def test_checkout_errors(client):
    assert client.post("/orders", json={"name": "Asha", "phone": "1", "address": "x"}).status_code == 401

    client.put("/session", json={"user_id": "alice"})
    assert client.post("/orders", json={"name": "Asha", "phone": "1", "address": "x"}).status_code == 400


def test_orders_admin_only(client):
    client.put("/session", json={"user_id": "alice"})
    assert client.get("/orders").status_code == 403

    client.put("/session", json={"user_id": "root"})
    resp = client.get("/orders")
    assert resp.status_code == 200
    assert resp.json()[0]["id"] == "ord-1"
