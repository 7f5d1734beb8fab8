"""
Service layer for tasks.

Tasks sit at the bottom of the ownership chain and may reference a
project through ``project_id``.  As with projects, the reference is
validated on every write that sets it to a non-null value.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from project_tracker_api.app.core.errors import NotFoundError, ValidationError
from project_tracker_api.app.core.store import InMemoryStore
from project_tracker_api.app.schemas.task import DEFAULT_STATUS, TaskCreate, TaskRead, TaskUpdate
from project_tracker_api.app.schemas.views import TaskDetail
from project_tracker_api.app.services.nesting import task_view
from project_tracker_api.app.services.partial import apply_changes, collect_changes

logger = logging.getLogger(__name__)

ENTITY = "Task"


class TaskService:
    """Service class for creating, listing, updating and deleting tasks."""

    @staticmethod
    def _check_project(store: InMemoryStore, project_id: Optional[int]) -> None:
        if project_id and store.find("projects", project_id) is None:
            raise NotFoundError.for_entity("Project")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    @classmethod
    async def create_task(cls, store: InMemoryStore, data: TaskCreate) -> TaskRead:
        """Validate and append a new task.

        Parameters
        ----------
        store : InMemoryStore
            Store receiving the task.
        data : TaskCreate
            Request payload.  ``description`` defaults to ``""`` and
            ``status`` to ``"todo"``; an empty or null ``status`` also
            falls back to ``"todo"``.

        Raises
        ------
        ValidationError
            If ``title`` is missing or empty.
        NotFoundError
            If ``projectId`` references a project that does not exist.
        """
        if not data.title:
            raise ValidationError.required("Title")
        with store.lock:
            cls._check_project(store, data.project_id)
            task = TaskRead(
                id=store.next_id("tasks"),
                title=data.title,
                description=data.description,
                status=data.status or DEFAULT_STATUS,
                project_id=data.project_id or None,
            )
            store.add("tasks", task)
        logger.info("Created task %s in project %s", task.id, task.project_id)
        return task

    @classmethod
    async def update_task(cls, store: InMemoryStore, task_id: int, data: TaskUpdate) -> TaskRead:
        """Apply the fields present in ``data`` to an existing task.

        ``title`` and ``status`` ignore empty values.  ``description``
        accepts ``""`` and ``null``.  ``projectId: null`` detaches the
        task while omitting ``projectId`` leaves it where it is.
        """
        changes = collect_changes(
            data, non_blank=("title", "status"), foreign_keys=("project_id",)
        )
        with store.lock:
            task = store.find("tasks", task_id)
            if task is None:
                raise NotFoundError.for_entity(ENTITY)
            cls._check_project(store, changes.get("project_id"))
            apply_changes(task, changes)
        logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(changes)) or "no changes")
        return task

    @classmethod
    async def delete_task(cls, store: InMemoryStore, task_id: int) -> None:
        with store.lock:
            if not store.remove("tasks", task_id):
                raise NotFoundError.for_entity(ENTITY)
        logger.info("Deleted task %s", task_id)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    @classmethod
    async def list_tasks(cls, store: InMemoryStore) -> List[TaskRead]:
        with store.lock:
            return list(store.tasks)

    @classmethod
    async def get_task(cls, store: InMemoryStore, task_id: int) -> TaskDetail:
        """Return the task with its project and the project's owner."""
        view = task_view(*store.snapshot(), task_id)
        if view is None:
            raise NotFoundError.for_entity(ENTITY)
        return view
