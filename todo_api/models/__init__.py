from .task import Task
from .errors import (
    BackendError,
    NameEmptyError,
    TaskAlreadyExistsError,
    TaskError,
    TaskNotFoundError,
    TaskValidationError,
)

# Export all models for easy importing
__all__ = [
    "Task",
    "TaskError",
    "TaskValidationError",
    "NameEmptyError",
    "TaskNotFoundError",
    "TaskAlreadyExistsError",
    "BackendError",
]
