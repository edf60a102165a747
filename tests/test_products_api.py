# tests/test_products_api.py
from fastapi.testclient import TestClient

from app.core import Outcome, Result
from app.main import ERROR_STATUS, _error_response, app

client = TestClient(app)


def test_list_products():
    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json() == [
        {"id": 1, "name": "Laptop", "price": 999.99, "description": "High-performance laptop"},
        {"id": 2, "name": "Mouse", "price": 29.99, "description": "Wireless optical mouse"},
        {"id": 3, "name": "Keyboard", "price": 79.99, "description": "Mechanical gaming keyboard"},
    ]


def test_get_product():
    r = client.get("/api/products/1")
    assert r.status_code == 200
    assert r.json() == {"id": 1, "name": "Laptop", "price": 999.99, "description": "High-performance laptop"}


def test_get_missing_product_is_empty_404():
    r = client.get("/api/products/999")
    assert r.status_code == 404
    assert r.content == b""


def test_get_non_integer_id_fails_validation():
    r = client.get("/api/products/abc")
    assert r.status_code == 422


def test_create_product():
    r = client.post("/api/products", json={"name": "Test Product", "price": 19.99, "description": "A test product"})
    assert r.status_code == 201
    body = r.json()
    assert body == {"id": 4, "name": "Test Product", "price": 19.99, "description": "A test product"}
    assert len(client.get("/api/products").json()) == 4


def test_create_location_resolves_to_product():
    r = client.post("/api/products", json={"name": "Lamp", "price": 12.5, "description": "Desk lamp"})
    location = r.headers["location"]
    assert location.endswith("/api/products/4")
    fetched = client.get(location)
    assert fetched.status_code == 200
    assert fetched.json() == r.json()


def test_create_ignores_body_id():
    r = client.post("/api/products", json={"id": 42, "name": "X", "price": 1, "description": "y"})
    assert r.status_code == 201
    assert r.json()["id"] == 4
    assert client.get("/api/products/42").status_code == 404


def test_two_creations_get_consecutive_ids():
    ids = []
    for name in ("first", "second"):
        client.get("/api/products")
        r = client.post("/api/products", json={"name": name, "price": 3.25, "description": ""})
        ids.append(r.json()["id"])
    assert ids == [4, 5]


def test_malformed_body_rejected_by_framework():
    r = client.post("/api/products", json={"name": "no price"})
    assert r.status_code == 422
    assert len(client.get("/api/products").json()) == 3


def test_error_status_table_covers_every_failure():
    assert set(ERROR_STATUS) == set(Outcome) - {Outcome.OK}


def test_rejected_outcome_is_empty_400():
    r = _error_response(Result(Outcome.REJECTED))
    assert r.status_code == 400
    assert r.body == b""


def test_not_found_outcome_is_empty_404():
    r = _error_response(Result(Outcome.NOT_FOUND))
    assert r.status_code == 404
    assert r.body == b""
