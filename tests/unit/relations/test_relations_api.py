from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def user_id(client: TestClient) -> int:
    user = {"username": "ana", "email": "ana@x.com", "password": "Secret123"}
    return client.post("/users", json=user).json()["id"]


@pytest.mark.unit
def test_category_link_routes(client: TestClient, user_id: int) -> None:
    first = client.post(f"/users/{user_id}/categories/2")
    assert first.status_code == 201
    assert first.json()["category_id"] == 2
    assert client.post(f"/users/{user_id}/categories/2").status_code == 200
    client.post(f"/users/{user_id}/categories/3")

    listed = client.get(f"/users/{user_id}/categories").json()
    assert [link["category_id"] for link in listed] == [2, 3]
    assert client.get(f"/users/{user_id}/categories/2/exists").json() == {"exists": True}

    assert client.delete(f"/users/{user_id}/categories/2").status_code == 204
    assert client.get(f"/users/{user_id}/categories/2/exists").json() == {"exists": False}
    assert client.delete(f"/users/{user_id}/categories/2").status_code == 404
    assert client.delete(f"/users/{user_id}/categories").json() == {"deleted": 1}

    assert client.get("/users/999/categories").status_code == 404
    assert client.post(f"/users/{user_id}/categories/0").status_code == 400


@pytest.mark.unit
def test_contact_link_routes(client: TestClient, user_id: int) -> None:
    contact_id = client.post("/contacts", json={"client_id": 3, "contact_name": "Bia"}).json()["id"]

    assert client.post(f"/users/{user_id}/contacts/{contact_id}").status_code == 201
    assert [link["contact_id"] for link in client.get(f"/users/{user_id}/contacts").json()] == [
        contact_id
    ]
    assert client.get(f"/users/{user_id}/contacts/{contact_id}/exists").json() == {"exists": True}
    assert client.delete(f"/users/{user_id}/contacts").json() == {"deleted": 1}
