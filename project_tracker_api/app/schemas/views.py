"""
Nested read views returned by the single-record GET endpoints.

Each view extends the plain read schema of its root record with the
related records found at request time:

* ``PersonDetail``: the person plus every project it owns, each with
  that project's tasks.
* ``ProjectDetail``: the project plus its tasks and its owner.
* ``TaskDetail``: the task plus its project and that project's owner.

Views are built by ``services.nesting`` and are never written back to
the store.
"""

from typing import List, Optional

from pydantic import Field

from .person import PersonRead
from .project import ProjectRead
from .task import TaskRead


class ProjectWithTasks(ProjectRead):
    tasks: List[TaskRead] = Field(default_factory=list)


class PersonDetail(PersonRead):
    projects: List[ProjectWithTasks] = Field(default_factory=list)


class ProjectDetail(ProjectRead):
    tasks: List[TaskRead] = Field(default_factory=list)
    person: Optional[PersonRead] = None


class TaskDetail(TaskRead):
    project: Optional[ProjectRead] = None
    person: Optional[PersonRead] = None
