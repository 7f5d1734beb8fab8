"""
Pydantic models for projects.

A project optionally belongs to a person through ``personId``.  The
reference is checked when the project is written; nothing keeps it
valid afterwards, so a project may point at a deleted person.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from . import CAMEL_CONFIG


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: Optional[str] = Field(None, examples=["Mint"])
    description: Optional[str] = Field(None, examples=["App Dental"])
    person_id: Optional[int] = Field(None, examples=[1])

    model_config = CAMEL_CONFIG


class ProjectUpdate(BaseModel):
    """Schema for updating a project.

    ``description`` and ``personId`` may be cleared with an explicit
    ``null``.  ``createdAt`` is immutable and therefore not accepted.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    person_id: Optional[int] = None

    model_config = CAMEL_CONFIG


class ProjectRead(BaseModel):
    """Schema for a stored project."""

    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    person_id: Optional[int] = None

    model_config = CAMEL_CONFIG
