from typing import Optional, Tuple

from fastapi import Request
from pymongo import AsyncMongoClient

from .config import (
    MONGODB_COLLECTION,
    MONGODB_DATABASE,
    MONGODB_TIMEOUT_MS,
    MONGODB_URL,
    STORAGE_BACKEND,
)
from .logging_config import get_logger
from .repositories import InMemoryTaskRepository, MongoTaskRepository, TaskRepository
from .services import TaskService

logger = get_logger(__name__)


def _create_mongo_client() -> AsyncMongoClient:
    return AsyncMongoClient(
        MONGODB_URL,
        serverSelectionTimeoutMS=MONGODB_TIMEOUT_MS,
    )


def create_repository(
    backend: str = STORAGE_BACKEND,
) -> Tuple[TaskRepository, Optional[AsyncMongoClient]]:
    """Build the configured task repository.

    Returns the repository together with the Mongo client it owns (None for
    the in-memory backend) so the caller can close it at shutdown.
    """
    if backend == "memory":
        logger.info("Using in-memory todo storage")
        return InMemoryTaskRepository(), None

    if backend == "mongodb":
        client = _create_mongo_client()
        collection = client[MONGODB_DATABASE][MONGODB_COLLECTION]
        logger.info(f"Using MongoDB todo storage: {MONGODB_DATABASE}.{MONGODB_COLLECTION}")
        return MongoTaskRepository(collection), client

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def get_task_service(request: Request) -> TaskService:
    """Dependency to get the application's task service."""
    return request.app.state.task_service
