# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.repositories import InMemoryTaskRepository, MongoTaskRepository, TaskRepository
from todo_api.services import TaskService

from .fakes import FakeCollection


@pytest.fixture()
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture()
def memory_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def mongo_repository(collection: FakeCollection) -> MongoTaskRepository:
    return MongoTaskRepository(collection)


@pytest.fixture(params=["memory", "mongodb"])
def repository(request: pytest.FixtureRequest) -> TaskRepository:
    """Every backend, so contract tests run against both."""
    if request.param == "memory":
        return InMemoryTaskRepository()
    return MongoTaskRepository(FakeCollection())


@pytest.fixture()
def service(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@pytest.fixture()
def client(memory_repository: InMemoryTaskRepository) -> Iterator[TestClient]:
    app = create_app(TaskService(memory_repository))
    with TestClient(app) as test_client:
        yield test_client
