"""
Read-side joins for the single-record GET endpoints.

These functions take the three collections and an id and return a
freshly built nested view, or ``None`` when the root record does not
exist.  They never mutate their inputs and every record placed in a
view is a copy, so callers are free to modify or serialise the result.
Because they depend on nothing but plain lists they can be tested
without a running application.

A reference to a record that no longer exists (for example a project
whose owner was deleted) resolves to ``None`` rather than an error.
"""

from typing import List, Optional, Sequence

from ..schemas.person import PersonRead
from ..schemas.project import ProjectRead
from ..schemas.task import TaskRead
from ..schemas.views import PersonDetail, ProjectDetail, ProjectWithTasks, TaskDetail


def _first(records: Sequence, record_id: Optional[int]):
    if record_id is None:
        return None
    for record in records:
        if record.id == record_id:
            return record
    return None


def _tasks_of(tasks: Sequence[TaskRead], project_id: int) -> List[TaskRead]:
    return [task.model_copy() for task in tasks if task.project_id == project_id]


def person_view(
    people: Sequence[PersonRead],
    projects: Sequence[ProjectRead],
    tasks: Sequence[TaskRead],
    person_id: int,
) -> Optional[PersonDetail]:
    """Person with its projects, each project carrying its tasks."""
    person = _first(people, person_id)
    if person is None:
        return None
    owned = [
        ProjectWithTasks(**project.model_dump(), tasks=_tasks_of(tasks, project.id))
        for project in projects
        if project.person_id == person.id
    ]
    return PersonDetail(**person.model_dump(), projects=owned)


def project_view(
    people: Sequence[PersonRead],
    projects: Sequence[ProjectRead],
    tasks: Sequence[TaskRead],
    project_id: int,
) -> Optional[ProjectDetail]:
    """Project with its tasks and its owner."""
    project = _first(projects, project_id)
    if project is None:
        return None
    owner = _first(people, project.person_id)
    return ProjectDetail(
        **project.model_dump(),
        tasks=_tasks_of(tasks, project.id),
        person=owner.model_copy() if owner else None,
    )


def task_view(
    people: Sequence[PersonRead],
    projects: Sequence[ProjectRead],
    tasks: Sequence[TaskRead],
    task_id: int,
) -> Optional[TaskDetail]:
    """Task with its project and that project's owner."""
    task = _first(tasks, task_id)
    if task is None:
        return None
    project = _first(projects, task.project_id)
    owner = _first(people, project.person_id) if project else None
    return TaskDetail(
        **task.model_dump(),
        project=project.model_copy() if project else None,
        person=owner.model_copy() if owner else None,
    )
