"""
Tests for the HTTP boundary: paths, envelopes and status mapping.
"""

import uuid

import pytest

from exceptions import PersistenceError
from services.item_service import ItemStore


@pytest.fixture
def food_id(categories) -> str:
    return str(categories["Food"].id)


def post_item(client, category_id, **overrides):
    body = {"name": "Coffee", "cost": 4.5, "type": "debit", "category_id": category_id, "user_id": 1}
    body.update(overrides)
    return client.post("/api/v1/item", json=body)


def test_hello(client):
    for path in ("/hello", "/api/v1/hello"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.text == "Welcome"


def test_create_and_fetch_item(client, food_id):
    created = post_item(client, food_id)
    assert created.status_code == 200
    assert created.json()["message"] == "ok"
    item_id = created.json()["data"]["id"]

    response = client.get(f"/api/v1/items/{item_id}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Coffee"
    assert data["cost"] == 4.5
    assert data["type"] == "debit"
    assert data["category_id"] == food_id
    assert data["user_id"] == 1
    assert "createdAt" in data


def test_create_rejects_bad_type(client, food_id):
    response = post_item(client, food_id, type="transfer")
    assert response.status_code == 422


def test_create_rejects_negative_cost(client, food_id):
    response = post_item(client, food_id, cost=-1)
    assert response.status_code == 422


def test_create_rejects_unknown_category(client, categories):
    response = post_item(client, str(uuid.uuid4()))
    assert response.status_code == 422
    assert "Unknown category" in response.json()["detail"]


def test_list_items_filters_by_user(client, food_id):
    post_item(client, food_id, user_id=1)
    post_item(client, food_id, user_id=2, name="Tea")

    everyone = client.get("/api/v1/items").json()["data"]
    mine = client.get("/api/v1/items", params={"user_id": 2}).json()["data"]

    assert len(everyone) == 2
    assert [i["name"] for i in mine] == ["Tea"]


def test_get_unknown_item_is_404(client, categories):
    response = client.get(f"/api/v1/items/{uuid.uuid4()}")
    assert response.status_code == 404


def test_get_malformed_id_is_422(client, categories):
    response = client.get("/api/v1/items/not-a-uuid")
    assert response.status_code == 422


def test_patch_item_updates_one_field(client, food_id):
    item_id = post_item(client, food_id).json()["data"]["id"]

    response = client.patch(f"/api/v1/items/{item_id}", json={"name": "Espresso"})

    assert response.status_code == 200
    data = client.get(f"/api/v1/items/{item_id}").json()["data"]
    assert data["name"] == "Espresso"
    assert data["cost"] == 4.5


def test_patch_rejects_unknown_column(client, food_id):
    item_id = post_item(client, food_id).json()["data"]["id"]

    response = client.patch(f"/api/v1/items/{item_id}", json={"user_id": 99})

    assert response.status_code == 422
    assert client.get(f"/api/v1/items/{item_id}").json()["data"]["user_id"] == 1


def test_patch_unknown_item_is_404(client, categories):
    response = client.patch(f"/api/v1/items/{uuid.uuid4()}", json={"name": "Tea"})
    assert response.status_code == 404


def test_update_with_id_in_body(client, food_id):
    item_id = post_item(client, food_id).json()["data"]["id"]

    response = client.patch("/api/v1/update/item", json={"id": item_id, "cost": 6})

    assert response.status_code == 200
    assert response.json()["data"]["cost"] == 6.0


def test_delete_is_idempotent(client, food_id):
    item_id = post_item(client, food_id).json()["data"]["id"]

    first = client.delete(f"/api/v1/items/{item_id}")
    second = client.delete(f"/api/v1/items/{item_id}")

    assert first.status_code == 200
    assert first.json()["data"]["rows_affected"] == 1
    assert second.status_code == 200
    assert second.json()["data"]["rows_affected"] == 0
    assert client.get(f"/api/v1/items/{item_id}").status_code == 404


def test_dashboard_data(client, categories):
    post_item(client, str(categories["Food"].id), name="Coffee", cost=4.5, type="debit")
    post_item(client, str(categories["Salary"].id), name="Salary", cost=2000, type="credit")

    response = client.get("/api/v1/dashboard-data")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["incomeVsExpenses"] == {"expenses": 4.5, "income": 2000.0}
    assert {c["category"] for c in data["categories"]} == {"Food", "Salary"}
    assert len(data["monthly"]) == 1


def test_dashboard_empty_returns_zero_totals(client, categories):
    data = client.get("/api/v1/dashboard-data", params={"user_id": 5}).json()["data"]

    assert data["categories"] == []
    assert data["incomeVsExpenses"] == {"expenses": 0.0, "income": 0.0}
    assert data["monthly"] == []


def test_persistence_error_maps_to_500(client, categories, monkeypatch):
    def broken(db, user_id=None):
        raise PersistenceError("list failed")

    monkeypatch.setattr(ItemStore, "get_all", staticmethod(broken))

    response = client.get("/api/v1/items")

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


def test_blank_user_id_matches_all_users(client, food_id):
    post_item(client, food_id, user_id=3)

    items = client.get("/api/v1/items?user_id=")
    dashboard = client.get("/api/v1/dashboard-data?user_id=")

    assert items.status_code == 200
    assert [i["user_id"] for i in items.json()["data"]] == [3]
    assert dashboard.status_code == 200
    assert dashboard.json()["data"]["incomeVsExpenses"]["expenses"] == 4.5


def test_non_integer_user_id_is_422(client, categories):
    assert client.get("/api/v1/items", params={"user_id": "abc"}).status_code == 422
    assert client.get("/api/v1/dashboard-data", params={"user_id": "abc"}).status_code == 422
