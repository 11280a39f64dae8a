from typing import Dict, List
from uuid import UUID

from ..models import Task, TaskAlreadyExistsError, TaskNotFoundError
from .base import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Process-local task store.

    Every operation is a single dict primitive (``setdefault``, ``get``,
    ``pop`` or item assignment) with no ``await`` in between, so each call is
    atomic per key without holding a lock across the whole store.

    Stored tasks are private copies; callers always receive fresh copies.
    """

    def __init__(self):
        self._tasks: Dict[UUID, Task] = {}

    async def create(self, task: Task) -> None:
        stored = task.model_copy()
        if self._tasks.setdefault(task.id, stored) is not stored:
            raise TaskAlreadyExistsError(task.id)

    async def get_all(self) -> List[Task]:
        return [task.model_copy() for task in list(self._tasks.values())]

    async def get_by_id(self, task_id: UUID) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task.model_copy()

    async def save(self, task: Task) -> None:
        # Upsert: saving an unknown id stores it rather than failing.
        self._tasks[task.id] = task.model_copy()

    async def delete(self, task_id: UUID) -> None:
        if self._tasks.pop(task_id, None) is None:
            raise TaskNotFoundError(task_id)

    async def mark_done(self, task_id: UUID) -> None:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        self._tasks[task_id] = task.model_copy(update={"done": True})
