"""MongoDB task repository."""

from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..logging_config import get_logger
from ..models import BackendError, Task, TaskAlreadyExistsError, TaskNotFoundError
from .base import TaskRepository

logger = get_logger(__name__)

COLLECTION_NAME = "todo"


class TaskDocument(BaseModel):
    """Persisted shape of a task.

    The primary key is the stringified task id and ``created`` is stored as
    ISO-8601 text with its UTC offset.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    created: str
    done: bool

    @classmethod
    def from_task(cls, task: Task) -> "TaskDocument":
        return cls(
            id=str(task.id),
            name=task.name,
            created=task.created.isoformat(),
            done=task.done,
        )

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "TaskDocument":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise BackendError(f"malformed todo document {raw.get('_id')!r}") from e

    def to_task(self) -> Task:
        """Translate back into a ``Task``; bad ids or timestamps raise ``BackendError``."""
        try:
            task_id = UUID(self.id)
            created = datetime.fromisoformat(self.created)
        except ValueError as e:
            raise BackendError(f"malformed todo document {self.id!r}") from e

        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)

        return Task(id=task_id, name=self.name, created=created, done=self.done)

    def to_mongo(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class MongoTaskRepository(TaskRepository):
    """Task repository backed by one MongoDB collection.

    The collection (and the client behind it) is owned by whoever builds the
    repository; this class never closes it.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    @staticmethod
    def _key(task_id: UUID) -> Dict[str, str]:
        return {"_id": str(task_id)}

    async def create(self, task: Task) -> None:
        document = TaskDocument.from_task(task)
        try:
            await self.collection.insert_one(document.to_mongo())
        except DuplicateKeyError as e:
            raise TaskAlreadyExistsError(task.id) from e
        except PyMongoError as e:
            logger.error(f"Error creating todo {task.id}", exc_info=True)
            raise BackendError(str(e)) from e

    async def get_all(self) -> List[Task]:
        try:
            raw_documents = [raw async for raw in self.collection.find({})]
        except PyMongoError as e:
            logger.error("Error listing todos", exc_info=True)
            raise BackendError(str(e)) from e

        try:
            return [TaskDocument.from_raw(raw).to_task() for raw in raw_documents]
        except BackendError:
            logger.error("Error translating todo documents", exc_info=True)
            raise

    async def get_by_id(self, task_id: UUID) -> Task:
        try:
            raw = await self.collection.find_one(self._key(task_id))
        except PyMongoError as e:
            logger.error(f"Error getting todo {task_id}", exc_info=True)
            raise BackendError(str(e)) from e

        if raw is None:
            raise TaskNotFoundError(task_id)

        try:
            return TaskDocument.from_raw(raw).to_task()
        except BackendError:
            logger.error(f"Error translating todo {task_id}", exc_info=True)
            raise

    async def save(self, task: Task) -> None:
        document = TaskDocument.from_task(task)
        update = {"$set": {"name": document.name, "created": document.created, "done": document.done}}
        await self._update_existing(task.id, update)

    async def delete(self, task_id: UUID) -> None:
        try:
            result = await self.collection.delete_one(self._key(task_id))
        except PyMongoError as e:
            logger.error(f"Error deleting todo {task_id}", exc_info=True)
            raise BackendError(str(e)) from e

        if result.deleted_count == 0:
            raise TaskNotFoundError(task_id)

    async def mark_done(self, task_id: UUID) -> None:
        await self._update_existing(task_id, {"$set": {"done": True}})

    async def _update_existing(self, task_id: UUID, update: Dict[str, Any]) -> None:
        try:
            result = await self.collection.update_one(self._key(task_id), update)
        except PyMongoError as e:
            logger.error(f"Error updating todo {task_id}", exc_info=True)
            raise BackendError(str(e)) from e

        # update_one silently matches nothing for an unknown id
        if result.matched_count == 0:
            raise TaskNotFoundError(task_id)
