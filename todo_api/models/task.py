from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from .errors import NameEmptyError


class Task(BaseModel):
    """A single todo item.

    ``id``, ``name`` and ``created`` are frozen once the task exists; ``done``
    only ever moves from False to True through ``mark_done``.
    """

    id: UUID = Field(frozen=True)
    name: str = Field(frozen=True)
    created: datetime = Field(frozen=True)
    done: bool = False

    @classmethod
    def new(cls, name: str) -> "Task":
        """Build a fresh task, rejecting an empty name."""
        if not name:
            raise NameEmptyError()

        return cls(
            id=uuid4(),
            name=name,
            created=datetime.now(timezone.utc),
            done=False,
        )

    def mark_done(self) -> None:
        self.done = True
