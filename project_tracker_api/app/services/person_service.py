"""
Service layer for people.

People are the top of the ownership chain: projects may reference a
person through ``personId``.  Deleting a person does not touch the
projects that reference it; their ``personId`` is left dangling.
"""

from __future__ import annotations

import logging
from typing import List

from project_tracker_api.app.core.errors import NotFoundError, ValidationError
from project_tracker_api.app.core.store import InMemoryStore
from project_tracker_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from project_tracker_api.app.schemas.views import PersonDetail
from project_tracker_api.app.services.nesting import person_view
from project_tracker_api.app.services.partial import apply_changes, collect_changes

logger = logging.getLogger(__name__)

ENTITY = "Person"


class PersonService:
    """Service class for managing people."""

    @classmethod
    async def create_person(cls, store: InMemoryStore, data: PersonCreate) -> PersonRead:
        """Validate and append a new person.

        Raises
        ------
        ValidationError
            If ``name`` or ``email`` is missing or empty.
        """
        if not data.name:
            raise ValidationError.required("Name")
        if not data.email:
            raise ValidationError.required("Email")
        with store.lock:
            person = PersonRead(
                id=store.next_id("people"),
                name=data.name,
                email=data.email,
                role=data.role,
            )
            store.add("people", person)
        logger.info("Created person %s", person.id)
        return person

    @classmethod
    async def list_people(cls, store: InMemoryStore) -> List[PersonRead]:
        with store.lock:
            return list(store.people)

    @classmethod
    async def get_person(cls, store: InMemoryStore, person_id: int) -> PersonDetail:
        """Return the person with its projects and their tasks."""
        view = person_view(*store.snapshot(), person_id)
        if view is None:
            raise NotFoundError.for_entity(ENTITY)
        return view

    @classmethod
    async def update_person(
        cls, store: InMemoryStore, person_id: int, data: PersonUpdate
    ) -> PersonRead:
        """Apply the fields present in ``data`` to an existing person."""
        changes = collect_changes(data, non_blank=("name", "email"))
        with store.lock:
            person = store.find("people", person_id)
            if person is None:
                raise NotFoundError.for_entity(ENTITY)
            apply_changes(person, changes)
        logger.info("Updated person %s (%s)", person_id, ", ".join(sorted(changes)) or "no changes")
        return person

    @classmethod
    async def delete_person(cls, store: InMemoryStore, person_id: int) -> None:
        with store.lock:
            if not store.remove("people", person_id):
                raise NotFoundError.for_entity(ENTITY)
        logger.info("Deleted person %s", person_id)
