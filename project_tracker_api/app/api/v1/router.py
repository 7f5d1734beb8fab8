"""
Top‑level router for version 1 of the API.

This router aggregates the per-resource routers under a unified
prefix.  When new resources are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import info, people, projects, tasks

router = APIRouter()

router.include_router(people.router, prefix="/people", tags=["people"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(info.router, prefix="/info", tags=["info"])
