"""HTTP tests for the /api/users endpoints."""

import pytest
from fastapi.testclient import TestClient

from user_service.services.user_store import UserStore


def create(client: TestClient, name: str = "John Doe", email: str = "john@example.com") -> dict:
    response = client.post("/api/users", json={"name": name, "email": email})
    assert response.status_code == 201
    return response.json()


class TestListUsers:
    def test_empty(self, client: TestClient):
        response = client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == {"users": [], "count": 0}

    def test_lists_in_creation_order(self, client: TestClient):
        create(client, "Alice", "alice@example.com")
        create(client, "Bob", "bob@example.com")

        body = client.get("/api/users").json()

        assert body["count"] == 2
        assert [u["name"] for u in body["users"]] == ["Alice", "Bob"]
        assert all("updatedAt" not in u for u in body["users"])


class TestCreateUser:
    def test_create(self, client: TestClient):
        response = client.post("/api/users", json={"name": "John Doe", "email": "john@example.com"})

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["name"] == "John Doe"
        assert body["email"] == "john@example.com"
        assert body["createdAt"]
        assert "updatedAt" not in body

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "John Doe"},
            {"email": "john@example.com"},
            {"name": "", "email": "john@example.com"},
            {},
        ],
    )
    def test_missing_fields(self, client: TestClient, payload: dict):
        response = client.post("/api/users", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

    def test_without_body(self, client: TestClient):
        response = client.post("/api/users")
        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

    def test_malformed_json(self, client: TestClient):
        response = client.post("/api/users", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_ids_increase_across_deletes(self, client: TestClient):
        assert create(client)["id"] == 1
        assert create(client)["id"] == 2
        assert client.delete("/api/users/2").status_code == 204
        assert create(client)["id"] == 3


class TestGetUser:
    def test_get(self, client: TestClient):
        created = create(client, "Jane Doe", "jane@example.com")

        response = client.get(f"/api/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.parametrize("user_id", ["999", "abc", "-1", "1.5", "0", "1" * 5000])
    def test_not_found(self, client: TestClient, user_id: str):
        create(client)
        response = client.get(f"/api/users/{user_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestUpdateUser:
    def test_partial_update_keeps_email(self, client: TestClient):
        created = create(client, "Old", "old@example.com")

        response = client.put(f"/api/users/{created['id']}", json={"name": "New"})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "New"
        assert body["email"] == "old@example.com"
        assert body["createdAt"] == created["createdAt"]
        assert body["updatedAt"]

    def test_update_both_fields(self, client: TestClient):
        created = create(client)

        body = client.put(f"/api/users/{created['id']}", json={"name": "A", "email": "a@example.com"}).json()

        assert (body["id"], body["name"], body["email"]) == (created["id"], "A", "a@example.com")

    def test_update_persists(self, client: TestClient, store: UserStore):
        created = create(client)
        client.put(f"/api/users/{created['id']}", json={"email": "new@example.com"})

        assert store.get(created["id"]).email == "new@example.com"
        assert client.get(f"/api/users/{created['id']}").json()["email"] == "new@example.com"

    @pytest.mark.parametrize("user_id", ["42", "abc"])
    def test_update_unknown(self, client: TestClient, user_id: str):
        response = client.put(f"/api/users/{user_id}", json={"name": "New"})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestDeleteUser:
    def test_delete(self, client: TestClient):
        created = create(client)

        response = client.delete(f"/api/users/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/users/{created['id']}").status_code == 404
        assert client.get("/api/users").json()["count"] == 0

    def test_delete_unknown(self, client: TestClient):
        response = client.delete("/api/users/7")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
