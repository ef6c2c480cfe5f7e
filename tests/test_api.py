"""Tests for API endpoints"""
from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from api.index import app
from boutique.cart import CART_STORAGE_KEY, MemoryStorage
from boutique.routers.deps import SESSION_COOKIE, get_cart_storage, get_catalog, get_session_id


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def client(storage, catalog_service):
    """Test client with in-memory cart storage and a stubbed catalog"""
    app.dependency_overrides[get_cart_storage] = lambda: storage
    app.dependency_overrides[get_catalog] = lambda: catalog_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_texts(client):
    response = client.get("/api/texts", params={"lang": "en-GB"})
    data = response.json()
    assert data["lang"] == "en"
    assert data["texts"]["cart"]["empty"] == "Your cart is empty"


# ==================== PRODUCTS ====================

def test_get_products_all(client, sample_products):
    response = client.get("/api/products")
    assert response.status_code == 200

    data = response.json()
    assert [p["id"] for p in data["products"]] == [p.id for p in sample_products]
    assert data["categories"] == ["Accessoires", "Chemises", "Vestes"]
    assert data["selected_category"] == "all"
    assert data["products"][0]["price"] == 500.0


def test_get_products_by_category(client, chemise):
    response = client.get("/api/products", params={"category": "Chemises"})
    data = response.json()

    assert [p["id"] for p in data["products"]] == [chemise.id]
    assert data["count"] == 1
    # Category list always comes from the full catalog
    assert len(data["categories"]) == 3


def test_get_categories(client):
    response = client.get("/api/categories")
    assert response.json() == {"categories": ["Accessoires", "Chemises", "Vestes"]}


def test_get_product_by_id(client, veste):
    response = client.get(f"/api/products/{veste.id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Veste"


def test_get_product_not_found(client):
    response = client.get("/api/products/recMissing")
    assert response.status_code == 404


# ==================== CART ====================

def test_empty_cart(client):
    response = client.get("/api/cart")
    assert response.status_code == 200
    assert response.json() == {"items": [], "total": 0.0, "count": 0, "is_open": False}


def test_carts_are_scoped_to_session_cookie(catalog_service, veste):
    """Each visitor gets a session cookie and their own cart"""
    sessions = {}

    def session_storage(session_id: str = Depends(get_session_id)):
        return sessions.setdefault(session_id, MemoryStorage())

    app.dependency_overrides[get_cart_storage] = session_storage
    app.dependency_overrides[get_catalog] = lambda: catalog_service
    try:
        first = TestClient(app)
        response = first.post("/api/cart/add", json={"product_id": veste.id})
        session_id = response.cookies[SESSION_COOKIE]

        # Same cookie, same cart
        assert first.get("/api/cart").json()["count"] == 1
        # New visitor, empty cart
        assert TestClient(app).get("/api/cart").json()["count"] == 0
    finally:
        app.dependency_overrides.clear()

    assert len(session_id) == 32
    assert len(sessions) == 2


def test_session_cookie_set_on_error_response(client):
    """A first request that fails still hands out the session cookie"""
    response = client.post("/api/cart/add", json={"product_id": "recMissing"})
    assert response.status_code == 404
    session_id = response.cookies[SESSION_COOKIE]
    assert len(session_id) == 32

    # The visitor keeps that id; no new cookie is issued
    response = client.get("/api/cart")
    assert SESSION_COOKIE not in response.cookies
    assert client.cookies[SESSION_COOKIE] == session_id


def test_malformed_session_cookie_is_replaced(client):
    client.cookies.set(SESSION_COOKIE, "../../etc")
    response = client.get("/api/cart")
    assert response.cookies[SESSION_COOKIE] != "../../etc"
    assert len(response.cookies[SESSION_COOKIE]) == 32


def test_add_to_cart(client, storage, veste):
    response = client.post("/api/cart/add", json={"product_id": veste.id})
    assert response.status_code == 200

    data = response.json()
    assert data["items"][0]["product_id"] == veste.id
    assert data["items"][0]["quantity"] == 1
    assert data["total"] == 500.0
    assert data["is_open"] is True
    assert storage.read(CART_STORAGE_KEY) is not None


def test_add_twice_increments(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})
    response = client.post("/api/cart/add", json={"product_id": veste.id})

    data = response.json()
    assert len(data["items"]) == 1
    assert data["count"] == 2
    assert data["total"] == 1000.0


def test_add_unknown_product(client):
    response = client.post("/api/cart/add", json={"product_id": "recMissing"})
    assert response.status_code == 404


def test_update_cart_item(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})
    response = client.patch("/api/cart/item", json={"product_id": veste.id, "quantity": 5})

    assert response.json()["count"] == 5
    assert response.json()["is_open"] is False


def test_update_to_zero_removes(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})
    response = client.patch("/api/cart/item", json={"product_id": veste.id, "quantity": 0})
    assert response.json()["items"] == []


def test_increment_and_decrement(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})

    response = client.post("/api/cart/item/increment", json={"product_id": veste.id})
    assert response.json()["count"] == 2

    client.post("/api/cart/item/decrement", json={"product_id": veste.id})
    response = client.post("/api/cart/item/decrement", json={"product_id": veste.id})
    assert response.json()["count"] == 1


def test_remove_cart_item(client, veste, chemise):
    client.post("/api/cart/add", json={"product_id": veste.id})
    client.post("/api/cart/add", json={"product_id": chemise.id})

    response = client.delete("/api/cart/item", params={"product_id": veste.id})

    assert [i["product_id"] for i in response.json()["items"]] == [chemise.id]


def test_cart_storage_failure_returns_503(catalog_service):
    broken = Mock()
    broken.read.side_effect = ValueError("Cart storage unavailable: timeout")
    app.dependency_overrides[get_cart_storage] = lambda: broken
    app.dependency_overrides[get_catalog] = lambda: catalog_service
    try:
        response = TestClient(app).get("/api/cart")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503


# ==================== CHECKOUT ====================

def test_checkout(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})
    client.post("/api/cart/add", json={"product_id": veste.id})

    response = client.post(
        "/api/checkout", json={"full_name": "Ali Ben", "location": "Casablanca"}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["url"].startswith("https://wa.me/212696044246?text=")
    text = parse_qs(urlsplit(data["url"]).query)["text"][0]
    assert text == data["message"]
    assert "- 2x Veste (500 DH)" in text
    assert "Total : 1000 DH" in text


def test_checkout_requires_client_info(client, veste):
    client.post("/api/cart/add", json={"product_id": veste.id})

    response = client.post("/api/checkout", json={"full_name": "Ali Ben", "location": ""})

    assert response.status_code == 400
    assert response.json()["detail"] == "Full name and location are required"


def test_checkout_empty_cart(client):
    response = client.post(
        "/api/checkout", json={"full_name": "Ali Ben", "location": "Casablanca"}
    )
    assert response.status_code == 400
