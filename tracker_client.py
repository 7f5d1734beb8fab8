"""Project Tracker API client.

This module defines a thin client around the Project Tracker REST API.
It uses the ``requests`` library internally and exposes one method per
operation for each resource:

* :meth:`TrackerAPI.list_people`, :meth:`TrackerAPI.get_person`,
  :meth:`TrackerAPI.create_person`, :meth:`TrackerAPI.update_person`,
  :meth:`TrackerAPI.delete_person`
* the same five operations for projects and tasks.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with keys ``status_code`` and
``message``.  The client never raises for HTTP or network errors, so
callers can branch on ``error`` without try/except.

Example::

    api = TrackerAPI(base_url="http://localhost:3000/api/v1")
    person, error = api.create_person({"name": "Ada", "email": "ada@example.com"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TrackerAPI:
    """Client for the people, projects and tasks resources."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the version prefix, e.g.
                ``http://localhost:3000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Any object with a
                compatible ``request`` method works.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/people``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as HTTP 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("message") or err_json.get("detail") or str(err_json)
            except ValueError:
                message = response.text
            message = message or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    def _list(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/{resource}")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _get(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/{resource}/{record_id}")

    def _create(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/{resource}", json_body=payload)

    def _update(
        self, resource: str, record_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/{resource}/{record_id}", json_body=payload)

    def _delete(self, resource: str, record_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/{resource}/{record_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------
    def list_people(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("people")

    def get_person(self, person_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a person with its nested ``projects``."""
        return self._get("people", person_id)

    def create_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._create("people", payload)

    def update_person(self, person_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._update("people", person_id, payload)

    def delete_person(self, person_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete("people", person_id)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def list_projects(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("projects")

    def get_project(self, project_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a project with its ``tasks`` and ``person``."""
        return self._get("projects", project_id)

    def create_project(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._create("projects", payload)

    def update_project(self, project_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._update("projects", project_id, payload)

    def delete_project(self, project_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete("projects", project_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("tasks")

    def get_task(self, task_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a task with its ``project`` and ``person``."""
        return self._get("tasks", task_id)

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._create("tasks", payload)

    def update_task(self, task_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._update("tasks", task_id, payload)

    def delete_task(self, task_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete("tasks", task_id)
