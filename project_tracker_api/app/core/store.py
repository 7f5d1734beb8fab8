"""
In-memory relational store.

The store owns three ordered collections (``people``, ``projects`` and
``tasks``), hands out record ids and guards everything with a single
coarse lock.  There is no persistence: data lives for the lifetime of
the process and is lost on restart.

``init_store`` builds a store from settings and optionally seeds it
with one person, one project and one task so that a freshly started
API has something to show.  The application factory creates exactly
one store and attaches it to ``app.state``; request handlers obtain it
through the ``get_store`` dependency in ``api.deps``.

Id allocation follows ``Settings.id_strategy``:

* ``counter``: a per-collection counter that only ever increases, so
  ids are never reused.
* ``length``: ``len(collection) + 1`` at insert time.  Deleting a
  record and creating a new one can therefore reuse an id, and two
  records may end up sharing one.  Lookups return the first match.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Union

from .config import Settings
from ..schemas.person import PersonRead
from ..schemas.project import ProjectRead
from ..schemas.task import TaskRead

logger = logging.getLogger(__name__)

COLLECTIONS = ("people", "projects", "tasks")

Record = Union[PersonRead, ProjectRead, TaskRead]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InMemoryStore:
    """Process-wide container for all records."""

    id_strategy: str = "counter"
    people: List[PersonRead] = field(default_factory=list)
    projects: List[ProjectRead] = field(default_factory=list)
    tasks: List[TaskRead] = field(default_factory=list)
    # Services hold this lock for the whole of each operation.  It is not
    # reentrant, so store methods called under it must not take it again.
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _counters: Dict[str, int] = field(
        default_factory=lambda: {name: 0 for name in COLLECTIONS}, repr=False
    )

    def collection(self, name: str) -> List[Record]:
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection {name!r}")
        return getattr(self, name)

    def next_id(self, name: str) -> int:
        """Return the id for a record about to be appended to ``name``."""
        records = self.collection(name)
        if self.id_strategy == "length":
            return len(records) + 1
        self._counters[name] += 1
        return self._counters[name]

    def find(self, name: str, record_id: int) -> Optional[Record]:
        """Return the first record in ``name`` with ``record_id`` or ``None``."""
        for record in self.collection(name):
            if record.id == record_id:
                return record
        return None

    def add(self, name: str, record: Record) -> None:
        self.collection(name).append(record)

    def remove(self, name: str, record_id: int) -> bool:
        """Remove the first record with ``record_id``.  Returns ``False`` if absent."""
        records = self.collection(name)
        for index, record in enumerate(records):
            if record.id == record_id:
                del records[index]
                return True
        return False

    def snapshot(self) -> Tuple[List[PersonRead], List[ProjectRead], List[TaskRead]]:
        """Shallow copies of the three collections for read-side joins."""
        with self.lock:
            return list(self.people), list(self.projects), list(self.tasks)

    def counts(self) -> Dict[str, int]:
        with self.lock:
            return {name: len(self.collection(name)) for name in COLLECTIONS}


def seed_store(store: InMemoryStore) -> None:
    """Insert the default person, project and task."""
    with store.lock:
        person = PersonRead(
            id=store.next_id("people"),
            name="Ada Lovelace",
            email="ada@example.com",
            role="admin",
        )
        store.add("people", person)
        project = ProjectRead(
            id=store.next_id("projects"),
            name="Mint",
            description="App Dental",
            created_at=utcnow(),
            person_id=person.id,
        )
        store.add("projects", project)
        store.add(
            "tasks",
            TaskRead(
                id=store.next_id("tasks"),
                title="Set up repository",
                description="",
                status="todo",
                project_id=project.id,
            ),
        )
    logger.info("Seeded store with 1 person, 1 project and 1 task")


def init_store(settings: Optional[Settings] = None) -> InMemoryStore:
    """Create the store for one application instance.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings providing ``id_strategy`` and ``seed_data``.  The
        module-level settings are used when omitted.
    """
    if settings is None:
        from .config import settings as default_settings

        settings = default_settings
    store = InMemoryStore(id_strategy=settings.id_strategy)
    if settings.seed_data:
        seed_store(store)
    return store
