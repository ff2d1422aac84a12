"""
HTTP tests for the product and search blueprints (Flask test client).
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "backend"))

from unittest import mock  # noqa: E402

import pytest  # noqa: E402

from catalog import RateLimiter, create_app, get_product_service  # noqa: E402

PRODUCTS_URL = "/api/v1/products/"
SEARCH_URL = "/api/v1/search/"


@pytest.fixture
def app():
    return create_app({"TESTING": True, "SEED_SAMPLE_PRODUCTS": True, "RATE_LIMIT_PER_MINUTE": 1000})


@pytest.fixture
def client(app):
    return app.test_client()


def test_list_products_returns_sample_in_insertion_order(client):
    res = client.get(PRODUCTS_URL)
    body = res.get_json()

    assert res.status_code == 200
    assert body["success"] is True
    assert [p["id"] for p in body["data"]] == [1, 2, 3, 4, 5]
    assert body["data"][0] == {
        "id": 1,
        "name": "Laptop Pro",
        "category": "Electronics",
        "price": 999.99,
        "date": "2024-03-01",
    }


def test_unseeded_app_starts_empty():
    app = create_app({"TESTING": True, "SEED_SAMPLE_PRODUCTS": False})
    body = app.test_client().get(PRODUCTS_URL).get_json()
    assert body["data"] == []


def test_each_app_owns_its_store(app):
    other = create_app({"TESTING": True})
    with app.app_context():
        get_product_service().delete_product(1)
    with other.app_context():
        assert get_product_service().get_product(1) is not None


def test_get_product_detail_and_404(client):
    assert client.get(f"{PRODUCTS_URL}2").get_json()["data"]["name"] == "Smart Watch"

    res = client.get(f"{PRODUCTS_URL}99")
    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_create_product_assigns_next_id(client):
    res = client.post(PRODUCTS_URL, json={
        "name": "Desk Lamp",
        "category": "Home",
        "price": "19.99",
        "date": "2024-04-01",
    })
    body = res.get_json()

    assert res.status_code == 201
    assert body["data"]["id"] == 6
    assert body["data"]["price"] == 19.99

    listed = client.get(PRODUCTS_URL).get_json()["data"]
    assert len(listed) == 6
    assert listed[-1]["name"] == "Desk Lamp"


def test_create_product_rejects_invalid_form(client):
    res = client.post(PRODUCTS_URL, json={"name": "", "category": "Toys", "price": "x", "date": ""})
    body = res.get_json()

    assert res.status_code == 400
    assert set(body["errors"]) == {"name", "category", "price", "date"}
    assert len(client.get(PRODUCTS_URL).get_json()["data"]) == 5


def test_update_product_replaces_in_place(client):
    res = client.put(f"{PRODUCTS_URL}3", json={
        "name": "Trail Shoes",
        "category": "Sports",
        "price": 120,
        "date": "2024-05-01",
    })
    assert res.status_code == 200

    listed = client.get(PRODUCTS_URL).get_json()["data"]
    assert listed[2] == {
        "id": 3,
        "name": "Trail Shoes",
        "category": "Sports",
        "price": 120.0,
        "date": "2024-05-01",
    }


def test_update_unknown_product_is_404(client):
    res = client.put(f"{PRODUCTS_URL}42", json={
        "name": "Ghost",
        "category": "Home",
        "price": 1,
        "date": "2024-01-01",
    })
    assert res.status_code == 404
    assert len(client.get(PRODUCTS_URL).get_json()["data"]) == 5


def test_delete_product_twice(client):
    assert client.delete(f"{PRODUCTS_URL}3").status_code == 200
    assert client.delete(f"{PRODUCTS_URL}3").status_code == 404
    assert len(client.get(PRODUCTS_URL).get_json()["data"]) == 4


def test_categories_endpoint_lists_vocabulary(client):
    body = client.get(f"{PRODUCTS_URL}categories").get_json()
    assert body["data"] == [
        {"id": "Electronics", "name": "Electrónicos"},
        {"id": "Sports", "name": "Deportes"},
        {"id": "Home", "name": "Hogar"},
    ]


def test_search_filters_sorts_and_counts(client):
    res = client.get(SEARCH_URL, query_string={"category": "Electronics", "sort": "price"})
    body = res.get_json()

    assert res.status_code == 200
    assert [p["name"] for p in body["data"]] == ["Wireless Mouse", "Smart Watch", "Laptop Pro"]
    assert body["total"] == 3
    assert body["criteria"]["category"] == "Electronics"
    assert body["criteria"]["sort"] == "price"


def test_search_price_range(client):
    body = client.get(SEARCH_URL, query_string={"min_price": "50", "max_price": "100"}).get_json()
    assert [p["name"] for p in body["data"]] == ["Running Shoes"]


def test_search_ignores_malformed_parameters(client):
    body = client.get(SEARCH_URL, query_string={
        "min_price": "abc",
        "start_date": "tomorrow",
        "sort": "random",
    }).get_json()
    assert [p["id"] for p in body["data"]] == [1, 2, 3, 4, 5]
    assert body["criteria"]["min_price"] is None


def test_search_reports_unexpected_errors(app, client):
    with app.app_context():
        service = get_product_service()
    with mock.patch.object(service, "search_products", side_effect=RuntimeError("boom")):
        res = client.get(SEARCH_URL)
    assert res.status_code == 500
    assert res.get_json() == {"success": False, "data": [], "message": "boom"}


def test_rate_limit_returns_429():
    app = create_app({"TESTING": True, "RATE_LIMIT_PER_MINUTE": 2})
    client = app.test_client()

    assert client.get(PRODUCTS_URL).status_code == 200
    assert client.get(PRODUCTS_URL).status_code == 200
    res = client.get(PRODUCTS_URL)
    assert res.status_code == 429
    assert res.get_json()["error"] == "TOO_MANY_REQUESTS"


def test_search_with_unknown_category_returns_nothing(client):
    body = client.get(SEARCH_URL, query_string={"category": "electronics"}).get_json()
    assert body["data"] == []
    assert body["total"] == 0
    assert body["criteria"]["category"] == "electronics"


def test_rate_limiter_drops_idle_keys():
    limiter = RateLimiter(requests_per_minute=5)
    with mock.patch("catalog.time.time", return_value=1000.0):
        assert limiter.is_allowed("10.0.0.1")
        assert limiter.is_allowed("10.0.0.2")
    with mock.patch("catalog.time.time", return_value=1061.0):
        assert limiter.is_allowed("10.0.0.3")
    assert set(limiter.requests) == {"10.0.0.3"}
