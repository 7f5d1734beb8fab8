"""
Information endpoint for API v1.

Returns the service name and version together with the current size
of each collection.  Useful as a liveness check and to see at a glance
what the in-memory store holds.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from project_tracker_api.app.api.deps import get_store
from project_tracker_api.app.core.store import InMemoryStore

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
@router.get("/", response_model=Dict[str, Any], include_in_schema=False)
async def get_info(request: Request, store: InMemoryStore = Depends(get_store)) -> Dict[str, Any]:
    app = request.app
    return {"name": app.title, "version": app.version, **store.counts()}
