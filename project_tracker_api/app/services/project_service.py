"""
Service layer for projects.

A project may reference its owner through ``person_id``.  The owner
must exist whenever a non-null reference is written; the check runs
before any mutation so a rejected request leaves the store untouched.
``created_at`` is set once on create and never changes.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from project_tracker_api.app.core.errors import NotFoundError, ValidationError
from project_tracker_api.app.core.store import InMemoryStore, utcnow
from project_tracker_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from project_tracker_api.app.schemas.views import ProjectDetail
from project_tracker_api.app.services.nesting import project_view
from project_tracker_api.app.services.partial import apply_changes, collect_changes

logger = logging.getLogger(__name__)

ENTITY = "Project"


class ProjectService:
    """Service class for managing projects."""

    @staticmethod
    def _check_owner(store: InMemoryStore, person_id: Optional[int]) -> None:
        if person_id and store.find("people", person_id) is None:
            raise NotFoundError.for_entity("Person")

    @classmethod
    async def create_project(cls, store: InMemoryStore, data: ProjectCreate) -> ProjectRead:
        """Validate and append a new project.

        A ``personId`` of ``0`` is treated as absent and stored as null.

        Raises
        ------
        ValidationError
            If ``name`` is missing or empty.
        NotFoundError
            If ``personId`` references a person that does not exist.
        """
        if not data.name:
            raise ValidationError.required("Name")
        with store.lock:
            cls._check_owner(store, data.person_id)
            project = ProjectRead(
                id=store.next_id("projects"),
                name=data.name,
                description=data.description,
                created_at=utcnow(),
                person_id=data.person_id or None,
            )
            store.add("projects", project)
        logger.info("Created project %s for person %s", project.id, project.person_id)
        return project

    @classmethod
    async def list_projects(cls, store: InMemoryStore) -> List[ProjectRead]:
        with store.lock:
            return list(store.projects)

    @classmethod
    async def get_project(cls, store: InMemoryStore, project_id: int) -> ProjectDetail:
        """Return the project with its tasks and owner."""
        view = project_view(*store.snapshot(), project_id)
        if view is None:
            raise NotFoundError.for_entity(ENTITY)
        return view

    @classmethod
    async def update_project(
        cls, store: InMemoryStore, project_id: int, data: ProjectUpdate
    ) -> ProjectRead:
        """Apply the fields present in ``data`` to an existing project.

        ``personId: null`` detaches the project from its owner; a
        non-null ``personId`` must reference an existing person.
        """
        changes = collect_changes(data, non_blank=("name",), foreign_keys=("person_id",))
        with store.lock:
            project = store.find("projects", project_id)
            if project is None:
                raise NotFoundError.for_entity(ENTITY)
            cls._check_owner(store, changes.get("person_id"))
            apply_changes(project, changes)
        logger.info("Updated project %s (%s)", project_id, ", ".join(sorted(changes)) or "no changes")
        return project

    @classmethod
    async def delete_project(cls, store: InMemoryStore, project_id: int) -> None:
        """Remove a project.  Its tasks keep their ``projectId``."""
        with store.lock:
            if not store.remove("projects", project_id):
                raise NotFoundError.for_entity(ENTITY)
        logger.info("Deleted project %s", project_id)
