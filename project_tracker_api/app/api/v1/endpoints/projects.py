"""
Project endpoints for API v1.

CRUD routes for projects.  Writes that set ``personId`` check that the
person exists and answer 404 ``{"message": "Person not found"}``
otherwise.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from project_tracker_api.app.api.deps import get_store, parse_record_id
from project_tracker_api.app.core.store import InMemoryStore
from project_tracker_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from project_tracker_api.app.schemas.views import ProjectDetail
from project_tracker_api.app.services.project_service import ENTITY, ProjectService

router = APIRouter()


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_project(
    project: Optional[ProjectCreate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> ProjectRead:
    """Create a new project.  ``name`` is required."""
    return await ProjectService.create_project(store, project or ProjectCreate())


@router.get("", response_model=List[ProjectRead])
@router.get("/", response_model=List[ProjectRead], include_in_schema=False)
async def list_projects(store: InMemoryStore = Depends(get_store)) -> List[ProjectRead]:
    return await ProjectService.list_projects(store)


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: str, store: InMemoryStore = Depends(get_store)) -> ProjectDetail:
    """Retrieve a project with its tasks and owner."""
    return await ProjectService.get_project(store, parse_record_id(project_id, ENTITY))


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: str,
    updates: Optional[ProjectUpdate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> ProjectRead:
    """Update an existing project.

    Send ``"personId": null`` to detach the project from its owner;
    omit ``personId`` to keep the current owner.
    """
    return await ProjectService.update_project(store, parse_record_id(project_id, ENTITY), updates or ProjectUpdate())


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, store: InMemoryStore = Depends(get_store)) -> None:
    await ProjectService.delete_project(store, parse_record_id(project_id, ENTITY))
    return None
