from fastapi.testclient import TestClient

from project_tracker_api.app.core.config import Settings
from project_tracker_api.app.main import create_app

API = "/api/v1"


def _create_people(client, count):
    return [
        client.post(f"{API}/people", json={"name": f"p{i}", "email": f"p{i}@example.com"}).json()["id"]
        for i in range(count)
    ]


def test_info_reports_collection_sizes(client):
    r = client.get(f"{API}/info")
    assert r.status_code == 200
    assert r.json() == {
        "name": "Project Tracker API",
        "version": "1.0.0",
        "people": 1,
        "projects": 1,
        "tasks": 1,
    }


def test_apps_do_not_share_stores(client, empty_client):
    client.post(f"{API}/people", json={"name": "a", "email": "a@example.com"})
    assert empty_client.get(f"{API}/people").json() == []


def test_counter_strategy_does_not_reuse_ids(empty_client):
    ids = _create_people(empty_client, 2)
    for person_id in ids:
        empty_client.delete(f"{API}/people/{person_id}")
    assert _create_people(empty_client, 1) == [3]


def test_length_strategy_reuses_ids_after_delete(length_client):
    # Compatibility mode: ids are collection length + 1, so emptying a
    # collection hands out id 1 again.
    ids = _create_people(length_client, 2)
    assert ids == [1, 2]
    for person_id in ids:
        length_client.delete(f"{API}/people/{person_id}")
    assert _create_people(length_client, 1) == [1]


def test_custom_prefix():
    client = TestClient(create_app(Settings(api_prefix="/v2", seed_data=False)))
    assert client.get("/v2/tasks").status_code == 200
    assert client.get(f"{API}/tasks").status_code == 404


def test_seed_example_chain(client):
    person = client.get(f"{API}/people/1").json()
    task = client.get(f"{API}/tasks/1").json()
    assert person["projects"][0]["tasks"][0]["title"] == task["title"]
    assert task["person"]["name"] == person["name"]
    assert task["project"]["id"] == person["projects"][0]["id"]
