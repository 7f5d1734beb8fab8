"""
Task endpoints for API v1.

CRUD routes for tasks.  ``GET /tasks/{id}`` resolves the chain
task → project → person and returns both related records alongside
the task.  Writes that set ``projectId`` check that the project exists.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from project_tracker_api.app.api.deps import get_store, parse_record_id
from project_tracker_api.app.core.store import InMemoryStore
from project_tracker_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from project_tracker_api.app.schemas.views import TaskDetail
from project_tracker_api.app.services.task_service import ENTITY, TaskService

router = APIRouter()


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_task(
    task: Optional[TaskCreate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> TaskRead:
    """Create a new task.

    ``title`` is required.  ``status`` defaults to ``"todo"`` and
    ``description`` to an empty string.
    """
    return await TaskService.create_task(store, task or TaskCreate())


@router.get("", response_model=List[TaskRead])
@router.get("/", response_model=List[TaskRead], include_in_schema=False)
async def list_tasks(store: InMemoryStore = Depends(get_store)) -> List[TaskRead]:
    return await TaskService.list_tasks(store)


@router.get("/{task_id}", response_model=TaskDetail)
async def get_task(task_id: str, store: InMemoryStore = Depends(get_store)) -> TaskDetail:
    """Retrieve a task with its project and the project's owner."""
    return await TaskService.get_task(store, parse_record_id(task_id, ENTITY))


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: str,
    updates: Optional[TaskUpdate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> TaskRead:
    """Update an existing task.

    An empty ``status`` leaves the status unchanged.  ``"projectId": null``
    detaches the task from its project, whereas omitting ``projectId``
    keeps the current project.
    """
    return await TaskService.update_task(store, parse_record_id(task_id, ENTITY), updates or TaskUpdate())


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, store: InMemoryStore = Depends(get_store)) -> None:
    await TaskService.delete_task(store, parse_record_id(task_id, ENTITY))
    return None
