"""
Shared dependencies for API routes.

``get_store`` hands each request the store owned by the application
instance that received it.  ``parse_record_id`` turns the raw ``{id}``
path segment into an integer the way the API has always read ids:
optional leading whitespace and sign, then the leading run of digits
(``"7"`` and ``"7abc"`` both give 7).  A segment with no leading digits
matches no record, so it raises the entity's ``NotFoundError`` instead
of FastAPI's 422.
"""

import re

from fastapi import Request

from project_tracker_api.app.core.errors import NotFoundError
from project_tracker_api.app.core.store import InMemoryStore

# ASCII whitespace and ASCII digits only; "\u00a0 7" or full-width digits match nothing.
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def parse_record_id(raw: str, entity: str) -> int:
    match = _LEADING_INT.match(raw)
    if not match:
        raise NotFoundError.for_entity(entity)
    return int(match.group(1))
