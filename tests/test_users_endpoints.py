"""Tests for user endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from gpa_tracker.api.app import create_app
from gpa_tracker.domain.errors import StoreError
from tests.conftest import InMemoryUserRepository


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container))


def _create(client: TestClient, name: str = "Ada", age: int = 36) -> dict:
    response = client.post(
        "/users",
        json={"name": name, "email": f"{name.lower()}@example.com", "age": age},
    )
    assert response.status_code == 201
    return response.json()


def test_create_then_list_includes_user_once(client: TestClient) -> None:
    created = _create(client)

    response = client.get("/users")

    assert response.status_code == 200
    ids = [user["id"] for user in response.json()]
    assert ids.count(created["id"]) == 1
    assert created["email"] == "ada@example.com"


def test_create_user_requires_all_fields(
    client: TestClient, user_repository: InMemoryUserRepository
) -> None:
    response = client.post("/users", json={"name": "Ada", "age": 36})

    assert response.status_code == 422
    assert user_repository.users == {}


def test_create_user_store_rejection_returns_400(
    client: TestClient, user_repository: InMemoryUserRepository, monkeypatch
) -> None:
    def reject(payload: dict[str, object]):  # type: ignore[no-untyped-def]
        raise StoreError(
            "Failed to create user: duplicate key violates constraint users_pkey"
        )

    monkeypatch.setattr(user_repository, "create_user", reject)

    response = client.post(
        "/users", json={"name": "Ada", "email": "ada@example.com", "age": 36}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Could not create user."}


def test_update_user_replaces_given_fields(client: TestClient) -> None:
    created = _create(client)

    response = client.put(f"/users/{created['id']}", json={"age": 40})

    assert response.status_code == 200
    assert response.json() == {**created, "age": 40}


def test_update_unknown_user_returns_404_and_keeps_others(
    client: TestClient,
) -> None:
    created = _create(client)

    response = client.put(f"/users/{uuid4()}", json={"name": "Grace"})

    assert response.status_code == 404
    assert "not found" in response.json()["message"]
    assert client.get("/users").json() == [created]


def test_update_rejects_malformed_id(client: TestClient) -> None:
    response = client.put("/users/not-an-id", json={"name": "Grace"})

    assert response.status_code == 422


def test_delete_user_removes_it(client: TestClient) -> None:
    keep = _create(client, "Ada")
    gone = _create(client, "Alan")

    response = client.delete(f"/users/{gone['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert client.get("/users").json() == [keep]


def test_delete_unknown_user_returns_404(client: TestClient) -> None:
    response = client.delete(f"/users/{uuid4()}")

    assert response.status_code == 404


def test_store_failure_returns_generic_message(
    client: TestClient, user_repository: InMemoryUserRepository, monkeypatch
) -> None:
    def fail():  # type: ignore[no-untyped-def]
        raise StoreError("Failed to list users: connection refused")

    monkeypatch.setattr(user_repository, "list_users", fail)

    response = client.get("/users")

    assert response.status_code == 500
    assert "connection refused" not in response.json()["message"]
