API = "/api/v1"


def test_create_task_defaults(client):
    r = client.post(f"{API}/tasks", json={"title": "Write docs"})
    assert r.status_code == 201
    assert r.json() == {"id": 2, "title": "Write docs", "description": "", "status": "todo", "projectId": None}


def test_create_task_in_project(client):
    body = client.post(
        f"{API}/tasks",
        json={"title": "Ship", "description": "v1", "status": "doing", "projectId": 1},
    ).json()
    assert body["projectId"] == 1
    assert body["status"] == "doing"
    assert [t["id"] for t in client.get(f"{API}/projects/1").json()["tasks"]] == [1, body["id"]]


def test_create_task_requires_title(client):
    r = client.post(f"{API}/tasks", json={"title": ""})
    assert r.status_code == 400
    assert r.json() == {"message": "Title is required"}


def test_create_task_unknown_project(client):
    r = client.post(f"{API}/tasks", json={"title": "x", "projectId": 3})
    assert r.status_code == 404
    assert r.json() == {"message": "Project not found"}
    assert len(client.get(f"{API}/tasks").json()) == 1


def test_get_task_nested(client):
    body = client.get(f"{API}/tasks/1").json()
    assert body["id"] == 1
    assert body["project"]["id"] == 1
    assert body["project"]["name"] == "Mint"
    assert body["person"]["id"] == 1
    assert body["person"]["email"] == "ada@example.com"


def test_get_task_not_found(client):
    r = client.get(f"{API}/tasks/2")
    assert r.status_code == 404
    assert r.json() == {"message": "Task not found"}


def test_update_task_empty_status_is_ignored(client):
    body = client.put(f"{API}/tasks/1", json={"status": ""}).json()
    assert body["status"] == "todo"


def test_update_task_status(client):
    assert client.put(f"{API}/tasks/1", json={"status": "done"}).json()["status"] == "done"


def test_update_task_null_project_clears_association(client):
    body = client.put(f"{API}/tasks/1", json={"projectId": None}).json()
    assert body["projectId"] is None
    assert client.get(f"{API}/projects/1").json()["tasks"] == []


def test_update_task_omitted_project_is_kept(client):
    body = client.put(f"{API}/tasks/1", json={"title": "Renamed"}).json()
    assert body["title"] == "Renamed"
    assert body["projectId"] == 1


def test_update_task_empty_description_is_stored(client):
    client.put(f"{API}/tasks/1", json={"description": "something"})
    assert client.put(f"{API}/tasks/1", json={"description": ""}).json()["description"] == ""


def test_update_task_unknown_project(client):
    r = client.put(f"{API}/tasks/1", json={"projectId": 8, "status": "done"})
    assert r.status_code == 404
    assert r.json() == {"message": "Project not found"}
    assert client.get(f"{API}/tasks/1").json()["status"] == "todo"


def test_update_task_not_found(client):
    r = client.put(f"{API}/tasks/5", json={"status": "done"})
    assert r.status_code == 404
    assert r.json() == {"message": "Task not found"}


def test_update_task_accepts_snake_case(client):
    project = client.post(f"{API}/projects", json={"name": "Other"}).json()
    assert client.put(f"{API}/tasks/1", json={"project_id": project["id"]}).json()["projectId"] == project["id"]


def test_delete_task(client):
    assert client.delete(f"{API}/tasks/1").status_code == 204
    assert client.get(f"{API}/tasks").json() == []
    r = client.delete(f"{API}/tasks/1")
    assert r.status_code == 404
    assert r.json() == {"message": "Task not found"}


JSON_NULL = {"content": "null", "headers": {"content-type": "application/json"}}


def test_create_task_without_body(client):
    for kwargs in ({}, JSON_NULL):
        r = client.post(f"{API}/tasks", **kwargs)
        assert r.status_code == 400
        assert r.json() == {"message": "Title is required"}
    assert len(client.get(f"{API}/tasks").json()) == 1


def test_update_task_without_body(client):
    before = client.get(f"{API}/tasks").json()[0]
    for kwargs in ({}, JSON_NULL):
        r = client.put(f"{API}/tasks/1", **kwargs)
        assert r.status_code == 200
        assert r.json() == before

    r = client.put(f"{API}/tasks/9")
    assert r.status_code == 404
    assert r.json() == {"message": "Task not found"}
