from pydantic import BaseModel
from datetime import datetime
from uuid import UUID


class TaskCreate(BaseModel):
    """Schema for creating new tasks."""
    name: str


class TaskResponse(BaseModel):
    """Task response schema for API responses."""
    id: UUID
    name: str
    created: datetime
    done: bool

    class Config:
        from_attributes = True
