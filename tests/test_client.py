import pytest
import requests

from tracker_client import TrackerAPI


@pytest.fixture
def api(client):
    # The TestClient speaks the same request() interface as a
    # requests.Session, so the client runs against the real app.
    return TrackerAPI(base_url="http://testserver/api/v1/", session=client)


def test_list_and_get(api):
    people, error = api.list_people()
    assert error is None
    assert [p["id"] for p in people] == [1]

    person, error = api.get_person(1)
    assert error is None
    assert person["projects"][0]["tasks"][0]["id"] == 1


def test_create_update_delete_roundtrip(api):
    project, error = api.create_project({"name": "Sage", "personId": 1})
    assert error is None

    task, error = api.create_task({"title": "t", "projectId": project["id"]})
    assert error is None
    assert task["status"] == "todo"

    task, error = api.update_task(task["id"], {"status": "done"})
    assert error is None
    assert task["status"] == "done"

    ok, error = api.delete_task(task["id"])
    assert ok is True
    assert error is None


def test_error_tuple_for_validation_and_missing(api):
    data, error = api.create_person({"name": "no email"})
    assert data is None
    assert error == {"status_code": 400, "message": "Email is required"}

    data, error = api.get_project(42)
    assert data is None
    assert error == {"status_code": 404, "message": "Project not found"}

    ok, error = api.delete_person(42)
    assert ok is False
    assert error["status_code"] == 404


class _BrokenSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_network_errors_are_returned_not_raised():
    api = TrackerAPI(base_url="http://localhost:1/api/v1", session=_BrokenSession())
    people, error = api.list_people()
    assert people == []
    assert error == {"status_code": None, "message": "connection refused"}
