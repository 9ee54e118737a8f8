from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_category_routes(client: TestClient) -> None:
    assert [c["name"] for c in client.get("/categories").json()] == [
        "Administrador",
        "Vendedor",
        "Estoquista",
    ]

    response = client.post("/categories", json={"name": "Financeiro"})
    assert response.status_code == 201
    category_id = response.json()["id"]

    response = client.put(f"/categories/{category_id}", json={"name": "Caixa", "description": "PDV"})
    assert response.status_code == 200
    assert client.get(f"/categories/{category_id}").json()["description"] == "PDV"

    assert client.post("/categories", json={"name": ""}).status_code == 400
    assert client.delete(f"/categories/{category_id}").status_code == 204
    assert client.get(f"/categories/{category_id}").status_code == 404
