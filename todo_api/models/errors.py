from uuid import UUID


class TaskError(Exception):
    """Base class for every failure produced by the task core."""


class TaskValidationError(TaskError):
    """Task input was rejected before anything was stored."""


class NameEmptyError(TaskValidationError):
    def __init__(self):
        super().__init__("todo name is empty")


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: UUID):
        self.task_id = task_id
        super().__init__(f"todo {task_id} not found")


class TaskAlreadyExistsError(TaskError):
    def __init__(self, task_id: UUID):
        self.task_id = task_id
        super().__init__(f"todo {task_id} already exists")


class BackendError(TaskError):
    """Opaque storage failure (connection, malformed document, translation).

    The original exception is kept as ``__cause__``.
    """
