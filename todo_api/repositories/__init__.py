from .base import TaskRepository
from .memory import InMemoryTaskRepository
from .mongodb import MongoTaskRepository, TaskDocument

__all__ = ["TaskRepository", "InMemoryTaskRepository", "MongoTaskRepository", "TaskDocument"]
