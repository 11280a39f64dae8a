"""Task service for the Todo API."""

from typing import List
from uuid import UUID

from ..logging_config import get_logger
from ..models import Task
from ..repositories import TaskRepository

logger = get_logger(__name__)


class TaskService:
    """Orchestrates task operations over a single repository.

    The repository is picked at startup; the service only knows the
    ``TaskRepository`` contract. Errors from the repository propagate
    unchanged and nothing is retried.
    """

    def __init__(self, repository: TaskRepository):
        """Initialize task service."""
        self.repository = repository

    async def create(self, name: str) -> Task:
        """Create and store a new task."""
        task = Task.new(name)
        logger.info(f"Creating todo: {task.id}")
        await self.repository.create(task)
        return task

    async def get(self, task_id: UUID) -> Task:
        """Get task by ID."""
        logger.info(f"Getting todo: {task_id}")
        return await self.repository.get_by_id(task_id)

    async def get_all(self) -> List[Task]:
        """List every task."""
        logger.info("Listing todos")
        return await self.repository.get_all()

    async def mark_done(self, task_id: UUID) -> None:
        """Mark a task as done."""
        logger.info(f"Marking todo done: {task_id}")
        await self.repository.mark_done(task_id)

    async def delete(self, task_id: UUID) -> None:
        """Delete a task."""
        logger.info(f"Deleting todo: {task_id}")
        await self.repository.delete(task_id)
