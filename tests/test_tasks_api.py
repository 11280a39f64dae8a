# tests/test_tasks_api.py

from __future__ import annotations

from unittest.mock import AsyncMock
from uuid import uuid4

from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.models import BackendError, TaskAlreadyExistsError
from todo_api.services import TaskService


def test_root_and_health(client: TestClient) -> None:
    assert client.get("/").json() == {"message": "Todo API"}
    assert client.get("/health").json() == {"status": "healthy"}


def test_full_lifecycle(client: TestClient) -> None:
    response = client.post("/api/todo", json={"name": "x"})
    assert response.status_code == 200
    created = response.json()
    assert created["name"] == "x"
    assert created["done"] is False
    todo_id = created["id"]

    response = client.get(f"/api/todo/{todo_id}")
    assert response.status_code == 200
    assert response.json() == created

    response = client.put(f"/api/todo/{todo_id}/done")
    assert response.status_code == 200
    assert response.content == b""
    assert client.get(f"/api/todo/{todo_id}").json()["done"] is True

    response = client.delete(f"/api/todo/{todo_id}")
    assert response.status_code == 200

    response = client.get(f"/api/todo/{todo_id}")
    assert response.status_code == 404
    assert response.json() == {"detail": "Task not found"}


def test_get_all(client: TestClient) -> None:
    client.post("/api/todo", json={"name": "buy milk"})
    client.post("/api/todo", json={"name": "walk dog"})

    response = client.get("/api/todo")

    assert response.status_code == 200
    assert sorted(t["name"] for t in response.json()) == ["buy milk", "walk dog"]


def test_empty_name_is_bad_request(client: TestClient) -> None:
    response = client.post("/api/todo", json={"name": ""})

    assert response.status_code == 400
    assert response.json() == {"detail": "todo name is empty"}


def test_malformed_id_is_bad_request(client: TestClient) -> None:
    assert client.get("/api/todo/not-a-uuid").status_code == 400
    assert client.put("/api/todo/not-a-uuid/done").status_code == 400
    assert client.delete("/api/todo/not-a-uuid").status_code == 400


def test_unknown_id_is_not_found(client: TestClient) -> None:
    todo_id = uuid4()

    assert client.put(f"/api/todo/{todo_id}/done").status_code == 404
    assert client.delete(f"/api/todo/{todo_id}").status_code == 404


def test_backend_error_is_server_error() -> None:
    service = AsyncMock(spec=TaskService)
    service.get_all.side_effect = BackendError("connection refused")

    with TestClient(create_app(service)) as client:
        response = client.get("/api/todo")

    assert response.status_code == 500
    assert response.json() == {"detail": "connection refused"}


def test_duplicate_is_conflict() -> None:
    todo_id = uuid4()
    service = AsyncMock(spec=TaskService)
    service.create.side_effect = TaskAlreadyExistsError(todo_id)

    with TestClient(create_app(service)) as client:
        response = client.post("/api/todo", json={"name": "some"})

    assert response.status_code == 409
