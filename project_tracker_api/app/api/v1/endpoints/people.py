"""
People endpoints for API v1.

CRUD routes for people.  ``GET /people/{id}`` returns the nested view:
the person together with the projects it owns, each carrying its
tasks.  Deleting a person leaves its projects in place.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from project_tracker_api.app.api.deps import get_store, parse_record_id
from project_tracker_api.app.core.store import InMemoryStore
from project_tracker_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from project_tracker_api.app.schemas.views import PersonDetail
from project_tracker_api.app.services.person_service import ENTITY, PersonService

router = APIRouter()


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PersonRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_person(
    person: Optional[PersonCreate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> PersonRead:
    """Create a new person.

    ``name`` and ``email`` are required; a missing value yields HTTP 400
    with ``{"message": "Name is required"}`` (or ``Email``).
    """
    return await PersonService.create_person(store, person or PersonCreate())


@router.get("", response_model=List[PersonRead])
@router.get("/", response_model=List[PersonRead], include_in_schema=False)
async def list_people(store: InMemoryStore = Depends(get_store)) -> List[PersonRead]:
    """Return every person in insertion order."""
    return await PersonService.list_people(store)


@router.get("/{person_id}", response_model=PersonDetail)
async def get_person(person_id: str, store: InMemoryStore = Depends(get_store)) -> PersonDetail:
    """Retrieve a person with nested projects and tasks.  404 if absent."""
    return await PersonService.get_person(store, parse_record_id(person_id, ENTITY))


@router.put("/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: str,
    updates: Optional[PersonUpdate] = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> PersonRead:
    """Update an existing person.

    Partial updates are supported; fields missing from the body keep
    their current value.
    """
    return await PersonService.update_person(store, parse_record_id(person_id, ENTITY), updates or PersonUpdate())


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: str, store: InMemoryStore = Depends(get_store)) -> None:
    """Delete a person.  Projects referencing it are not modified."""
    await PersonService.delete_person(store, parse_record_id(person_id, ENTITY))
    return None
