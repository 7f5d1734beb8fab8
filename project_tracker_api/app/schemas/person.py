"""
Pydantic models for people.

``name`` and ``email`` are required on create, but they are declared
optional here so that a missing value reaches ``PersonService`` and is
reported as HTTP 400 with a ``"Name is required"`` message instead of
FastAPI's generic 422.
"""

from typing import Optional

from pydantic import BaseModel, Field

from . import CAMEL_CONFIG


class PersonCreate(BaseModel):
    """Schema for creating a person."""

    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])
    role: Optional[str] = Field(None, examples=["developer"])

    model_config = CAMEL_CONFIG


class PersonUpdate(BaseModel):
    """Schema for updating a person.

    All fields are optional; only fields present in the request body
    are applied.  ``name`` and ``email`` cannot be blanked, so an
    explicit ``null`` or empty string for them is ignored.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    model_config = CAMEL_CONFIG


class PersonRead(BaseModel):
    """Schema for a stored person."""

    id: int
    name: str
    email: str
    role: Optional[str] = None

    model_config = CAMEL_CONFIG
