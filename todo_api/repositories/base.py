from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from ..models import Task


class TaskRepository(ABC):
    """Storage contract every task backend implements.

    All methods are coroutines. Failures are reported by raising
    ``TaskNotFoundError``, ``TaskAlreadyExistsError`` or ``BackendError``.
    """

    @abstractmethod
    async def create(self, task: Task) -> None:
        """Store a new task. An id that is already stored is rejected."""

    @abstractmethod
    async def get_all(self) -> List[Task]:
        """Return every stored task. Ordering is backend-defined."""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Task:
        """Return the task with ``task_id`` or raise ``TaskNotFoundError``."""

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Write back an existing task. Missing-id behavior is backend-defined."""

    @abstractmethod
    async def delete(self, task_id: UUID) -> None:
        """Remove the task with ``task_id`` or raise ``TaskNotFoundError``."""

    async def mark_done(self, task_id: UUID) -> None:
        """Move the task to done.

        This fallback is a plain read-modify-write and is not atomic: two
        concurrent callers each read and write independently. Backends
        override it with a single-step update.
        """
        task = await self.get_by_id(task_id)
        task.mark_done()
        await self.save(task)
