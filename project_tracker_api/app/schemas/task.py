"""
Pydantic models for tasks.

A task optionally belongs to a project through ``projectId``.  New
tasks start with an empty description and the ``"todo"`` status
unless the request says otherwise.
"""

from typing import Optional

from pydantic import BaseModel, Field

from . import CAMEL_CONFIG

DEFAULT_STATUS = "todo"


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    title: Optional[str] = Field(None, examples=["Write onboarding guide"])
    description: Optional[str] = Field("", examples=["Cover local setup and tests"])
    status: Optional[str] = Field(DEFAULT_STATUS, examples=["todo", "in_progress", "done"])
    project_id: Optional[int] = Field(None, examples=[1])

    model_config = CAMEL_CONFIG


class TaskUpdate(BaseModel):
    """Schema for updating a task.

    Only fields present in the request body are applied.  An empty
    ``status`` is ignored; ``projectId: null`` detaches the task from
    its project.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    project_id: Optional[int] = None

    model_config = CAMEL_CONFIG


class TaskRead(BaseModel):
    """Schema for a stored task."""

    id: int
    title: str
    description: Optional[str] = ""
    status: str = DEFAULT_STATUS
    project_id: Optional[int] = None

    model_config = CAMEL_CONFIG
