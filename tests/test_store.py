import pytest

from project_tracker_api.app.core.config import Settings
from project_tracker_api.app.core.store import InMemoryStore, init_store
from project_tracker_api.app.schemas.person import PersonRead


def _person(store, name="p"):
    person = PersonRead(id=store.next_id("people"), name=name, email=f"{name}@example.com")
    store.add("people", person)
    return person


def test_seed_creates_linked_records(store):
    assert [p.id for p in store.people] == [1]
    assert store.projects[0].person_id == 1
    assert store.tasks[0].project_id == 1
    assert store.tasks[0].status == "todo"
    assert store.projects[0].name == "Mint"


def test_seed_can_be_disabled(empty_store):
    assert empty_store.counts() == {"people": 0, "projects": 0, "tasks": 0}


def test_counter_never_reuses_ids():
    store = InMemoryStore(id_strategy="counter")
    first = _person(store, "a")
    second = _person(store, "b")
    assert store.remove("people", second.id)
    third = _person(store, "c")
    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_length_strategy_reuses_ids_after_delete():
    store = InMemoryStore(id_strategy="length")
    _person(store, "a")
    second = _person(store, "b")
    store.remove("people", second.id)
    third = _person(store, "c")
    assert third.id == second.id == 2


def test_length_strategy_can_duplicate_ids_and_find_returns_first():
    store = InMemoryStore(id_strategy="length")
    first = _person(store, "a")
    _person(store, "b")
    store.remove("people", first.id)
    duplicate = _person(store, "c")
    assert [p.id for p in store.people] == [2, 2]
    assert store.find("people", 2).name == "b"
    assert duplicate.name == "c"


def test_remove_missing_returns_false(empty_store):
    assert empty_store.remove("tasks", 42) is False


def test_find_preserves_insertion_order(empty_store):
    for name in ("x", "y", "z"):
        _person(empty_store, name)
    assert [p.name for p in empty_store.people] == ["x", "y", "z"]
    assert empty_store.find("people", 2).name == "y"


def test_snapshot_returns_copies(store):
    people, projects, tasks = store.snapshot()
    people.clear()
    assert len(store.people) == 1


def test_unknown_collection_rejected(store):
    with pytest.raises(KeyError):
        store.collection("widgets")


def test_init_store_honours_strategy():
    assert init_store(Settings(seed_data=False, id_strategy="length")).id_strategy == "length"


def test_settings_reject_unknown_strategy():
    with pytest.raises(ValueError):
        Settings(id_strategy="uuid")


def test_lock_is_not_reentrant(store):
    # Store methods never take the lock themselves while a service holds it.
    with store.lock:
        assert store.lock.acquire(blocking=False) is False
        store.find("people", 1)
        store.next_id("people")
