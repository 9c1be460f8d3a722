"""Tests for the FastAPI interface."""

import pytest
from fastapi.testclient import TestClient

from pulseboard import __version__
from pulseboard.interfaces.api import create_app


class RecordingNotifier:
    def __init__(self):
        self.calls = []

    def notify(self, project, action):
        self.calls.append((project.title, action))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(tmp_path, notifier):
    return create_app(data_dir=tmp_path / "api-data", notifier=notifier)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def project(client):
    response = client.post(
        "/api/projects",
        json={"title": "Website", "due_date": "2026-12-01", "priority": 2, "team": ["Ana"]},
    )
    assert response.status_code == 201, response.text
    return response.json()


def add_task(client, project_id, title, **fields):
    response = client.post(f"/api/projects/{project_id}/tasks", json={"title": title, **fields})
    assert response.status_code == 201, response.text
    return response.json()["tasks"][-1]


def test_root(client):
    assert client.get("/").json() == {"name": "Pulseboard", "version": __version__}


def test_create_project(project, notifier):
    assert project["progress"] == 0
    assert project["team"] == ["Ana"]
    assert notifier.calls == [("Website", "created")]


@pytest.mark.parametrize(
    "body",
    [
        {"title": "", "due_date": "2026-12-01"},
        {"title": "Website", "due_date": "2026-12-01", "priority": 9},
    ],
)
def test_create_rejects_invalid_draft(client, body):
    assert client.post("/api/projects", json=body).status_code == 400


def test_create_rejects_malformed_date(client):
    response = client.post("/api/projects", json={"title": "Website", "due_date": "soon"})
    assert response.status_code == 422


def test_get_and_missing(client, project):
    assert client.get(f"/api/projects/{project['id']}").json()["title"] == "Website"
    assert client.get("/api/projects/missing").status_code == 404


def test_update_project(client, project, notifier):
    response = client.put(
        f"/api/projects/{project['id']}",
        json={"title": "Portal", "due_date": "2026-11-01"},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Portal"
    assert response.json()["id"] == project["id"]
    assert notifier.calls[-1] == ("Portal", "updated")


def test_create_stamps_completed_tasks(client):
    response = client.post(
        "/api/projects",
        json={
            "title": "Launch",
            "due_date": "2026-12-01",
            "tasks": [
                {"title": "Ship", "status": "completed"},
                {"title": "Announce", "status": "todo", "completed_at": "2026-01-01T00:00:00Z"},
            ],
        },
    )
    assert response.status_code == 201
    ship, announce = response.json()["tasks"]
    assert ship["completed_at"] is not None
    assert announce["completed_at"] is None


def test_update_reopening_task_clears_stamp(client, project):
    task = add_task(client, project["id"], "Ship", status="completed")
    assert task["completed_at"] is not None
    body = {
        "title": "Website",
        "due_date": "2026-12-01",
        "tasks": [{**task, "status": "in-progress"}],
    }

    response = client.put(f"/api/projects/{project['id']}", json=body)
    assert response.status_code == 200
    reopened = response.json()["tasks"][0]
    assert reopened["status"] == "in-progress"
    assert reopened["completed_at"] is None

    stored = client.get(f"/api/projects/{project['id']}").json()["tasks"][0]
    assert stored["completed_at"] is None


def test_delete_project(client, project):
    response = client.delete(f"/api/projects/{project['id']}")
    assert response.json() == {"status": "deleted"}
    assert client.get(f"/api/projects/{project['id']}").status_code == 404
    assert client.delete(f"/api/projects/{project['id']}").status_code == 404


def test_task_status_updates_progress(client, project):
    task = add_task(client, project["id"], "Design", assignees=["Ana"])
    add_task(client, project["id"], "Build")

    response = client.patch(
        f"/api/projects/{project['id']}/tasks/{task['id']}",
        json={"status": "completed"},
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["progress"] == 50
    assert body["tasks"][0]["completed_at"] is not None

    stored = client.get(f"/api/projects/{project['id']}").json()
    assert stored["progress"] == 50


def test_task_status_unknown_task(client, project):
    response = client.patch(
        f"/api/projects/{project['id']}/tasks/missing",
        json={"status": "completed"},
    )
    assert response.status_code == 404


def test_task_status_conflict_while_saving(app, client, project):
    task = add_task(client, project["id"], "Design")
    coordinator = app.state.coordinator
    coordinator._in_flight.add(project["id"])
    try:
        response = client.patch(
            f"/api/projects/{project['id']}/tasks/{task['id']}",
            json={"status": "completed"},
        )
    finally:
        coordinator._in_flight.discard(project["id"])
    assert response.status_code == 409


def test_delete_task(client, project):
    task = add_task(client, project["id"], "Design", status="completed")
    response = client.delete(f"/api/projects/{project['id']}/tasks/{task['id']}")
    assert response.json()["tasks"] == []
    assert response.json()["progress"] == 0


def test_team_members(client, project):
    response = client.post(f"/api/projects/{project['id']}/team", json={"name": "Bruno"})
    assert response.json()["team"] == ["Ana", "Bruno"]
    response = client.delete(f"/api/projects/{project['id']}/team/Ana")
    assert response.json()["team"] == ["Bruno"]
    assert client.delete(f"/api/projects/{project['id']}/team/Ana").status_code == 404


def test_list_filters_and_sort(client):
    for title, due in [("Beta", "2026-01-20"), ("alpha", "2026-06-01"), ("Gamma", "2026-01-10")]:
        client.post("/api/projects", json={"title": title, "due_date": due})

    def titles(**params):
        response = client.get("/api/projects", params=params)
        assert response.status_code == 200, response.text
        return [p["title"] for p in response.json()]

    assert titles(sort="name") == ["alpha", "Beta", "Gamma"]
    assert titles(sort="dueDate") == ["Gamma", "Beta", "alpha"]
    assert titles(deadline="overdue", today="2026-01-15") == ["Gamma"]
    assert titles(deadline="this-week", today="2026-01-15") == ["Beta"]
    assert titles(search="ALP") == ["alpha"]
    assert sorted(titles(sort="unknown")) == ["Beta", "Gamma", "alpha"]


def test_list_rejects_bad_priority(client):
    assert client.get("/api/projects", params={"priority": "9"}).status_code == 400


def test_dashboard(client, project):
    task = add_task(client, project["id"], "Design")
    add_task(client, project["id"], "Build", status="in-progress")
    client.patch(f"/api/projects/{project['id']}/tasks/{task['id']}", json={"status": "completed"})

    stats = client.get("/api/dashboard").json()
    assert stats["total_projects"] == 1
    assert stats["total_tasks"] == 2
    assert stats["completed_tasks"] == 1
    assert stats["in_progress_tasks"] == 1
    assert stats["overall_progress"] == 50
    assert stats["team_members"] == 1


def test_timeline(client, project):
    add_task(client, project["id"], "Design")
    body = client.get("/api/timeline", params={"today": "2026-10-18"}).json()
    assert body["today"] == "2026-10-18"
    assert [m["label"] for m in body["months"]][:2] == ["Oct 26", "Nov 26"]
    (row,) = body["rows"]
    assert row["title"] == "Website"
    assert len(row["cells"]) == 48
    assert row["markers"][0]["placed_by"] == "index"
