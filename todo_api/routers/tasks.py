from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..database import get_task_service
from ..models import (
    TaskAlreadyExistsError,
    TaskError,
    TaskNotFoundError,
    TaskValidationError,
)
from ..schemas.task import TaskCreate, TaskResponse
from ..services import TaskService

router = APIRouter()


def _parse_task_id(task_id: str) -> UUID:
    try:
        return UUID(task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _to_http_error(error: TaskError) -> HTTPException:
    if isinstance(error, TaskNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    if isinstance(error, TaskValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, TaskAlreadyExistsError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    # BackendError and anything unexpected
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


@router.post("/todo", response_model=TaskResponse)
async def create_todo(
    payload: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task."""
    try:
        return await service.create(payload.name)
    except TaskError as e:
        raise _to_http_error(e)


@router.get("/todo", response_model=List[TaskResponse])
async def get_all_todos(service: TaskService = Depends(get_task_service)):
    """Get all tasks."""
    try:
        return await service.get_all()
    except TaskError as e:
        raise _to_http_error(e)


@router.get("/todo/{task_id}", response_model=TaskResponse)
async def get_todo(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Get a specific task by ID."""
    todo_id = _parse_task_id(task_id)
    try:
        return await service.get(todo_id)
    except TaskError as e:
        raise _to_http_error(e)


@router.put("/todo/{task_id}/done")
async def todo_done(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Mark a task as done."""
    todo_id = _parse_task_id(task_id)
    try:
        await service.mark_done(todo_id)
    except TaskError as e:
        raise _to_http_error(e)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/todo/{task_id}")
async def delete_todo(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Delete a specific task."""
    todo_id = _parse_task_id(task_id)
    try:
        await service.delete(todo_id)
    except TaskError as e:
        raise _to_http_error(e)
    return Response(status_code=status.HTTP_200_OK)
