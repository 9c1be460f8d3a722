"""Tests for JSON project persistence."""

import json
from datetime import date

import pytest

from pulseboard.domain.project import Project, ProjectDraft
from pulseboard.domain.shared import Err, Ok
from pulseboard.domain.task import Task, TaskStatus
from pulseboard.infrastructure import JsonStorage, ProjectRepository


@pytest.fixture
def repo(tmp_path) -> ProjectRepository:
    return ProjectRepository(tmp_path / "data")


def write_document(repo: ProjectRepository, project_id: str, created_at: str, **fields) -> None:
    repo.projects_dir.mkdir(parents=True, exist_ok=True)
    document = {"id": project_id, "title": project_id, "due_date": "2026-06-01", **fields}
    document["created_at"] = created_at
    (repo.projects_dir / f"{project_id}.json").write_text(json.dumps(document))


class TestJsonStorage:
    def test_round_trip(self, tmp_path):
        storage = JsonStorage()
        path = tmp_path / "nested" / "doc.json"
        assert isinstance(storage.save_json(path, {"a": 1}), Ok)
        assert storage.load_json(path).value == {"a": 1}
        assert not path.with_suffix(".json.tmp").exists()

    def test_list_documents(self, tmp_path):
        storage = JsonStorage()
        assert storage.list_documents(tmp_path / "missing").value == []
        storage.save_json(tmp_path / "b.json", {})
        storage.save_json(tmp_path / "a.json", {})
        (tmp_path / "notes.txt").write_text("x")
        assert [p.name for p in storage.list_documents(tmp_path).value] == ["a.json", "b.json"]

    def test_missing_file(self, tmp_path):
        assert isinstance(JsonStorage().load_json(tmp_path / "missing.json"), Err)

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert isinstance(JsonStorage().load_json(path), Err)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        result = JsonStorage().load_json(path)
        assert isinstance(result, Err)
        assert "Invalid JSON" in result.error


class TestProjectRepository:
    def test_empty_directory(self, repo):
        assert repo.load_all().value == []

    def test_create_and_get(self, repo):
        draft = ProjectDraft(title="Website", due_date=date(2026, 6, 1), team=["Ana"])
        project_id = repo.create(draft).value
        project = repo.get(project_id).value
        assert project.title == "Website"
        assert project.team == ["Ana"]
        assert repo.exists(project_id)

    def test_progress_is_derived_on_load(self, repo):
        write_document(
            repo,
            "p1",
            "2026-01-01T00:00:00+00:00",
            progress=99,
            tasks=[{"title": "a", "status": "completed"}, {"title": "b"}],
        )
        assert repo.get("p1").value.progress == 50

    def test_load_all_newest_first(self, repo):
        write_document(repo, "old", "2026-01-01T00:00:00+00:00")
        write_document(repo, "new", "2026-03-01T00:00:00+00:00")
        write_document(repo, "mid", "2026-02-01T00:00:00+00:00")
        assert [p.id for p in repo.load_all().value] == ["new", "mid", "old"]

    def test_invalid_documents_are_skipped(self, repo, caplog):
        write_document(repo, "good", "2026-01-01T00:00:00+00:00")
        (repo.projects_dir / "broken.json").write_text("{")
        (repo.projects_dir / "nodate.json").write_text(json.dumps({"title": "x"}))
        assert [p.id for p in repo.load_all().value] == ["good"]
        assert "Skipping" in caplog.text

    def test_save_preserves_created_at(self, repo):
        write_document(repo, "p1", "2026-01-01T00:00:00+00:00")
        project = repo.get("p1").value
        repo.save(project.model_copy(update={"title": "Renamed"}))
        document = json.loads((repo.projects_dir / "p1.json").read_text())
        assert document["created_at"] == "2026-01-01T00:00:00+00:00"
        assert document["title"] == "Renamed"

    @pytest.mark.parametrize("bad_id", ["../escape", "a b", ""])
    def test_invalid_ids_rejected(self, repo, bad_id):
        assert isinstance(repo.get(bad_id), Err)
        assert not repo.exists(bad_id)

    def test_update(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value
        draft = ProjectDraft(title="B", due_date=date(2026, 7, 1))
        assert isinstance(repo.update(project_id, draft), Ok)
        assert repo.get(project_id).value.title == "B"
        assert isinstance(repo.update("missing", draft), Err)

    def test_delete(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value
        assert isinstance(repo.delete(project_id), Ok)
        assert isinstance(repo.get(project_id), Err)
        assert isinstance(repo.delete(project_id), Err)

    def test_task_sub_records(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value

        added = repo.add_task(project_id, "Design", assignees=["Ana"]).value
        task = added.tasks[0]
        assert added.progress == 0
        assert task.assignees == ["Ana"]

        updated = repo.set_task_status(project_id, task.id, TaskStatus.COMPLETED).value
        assert updated.progress == 100
        assert updated.tasks[0].completed_at is not None
        assert repo.get(project_id).value.progress == 100

        assert isinstance(repo.set_task_status(project_id, "nope", TaskStatus.TODO), Err)
        assert repo.delete_task(project_id, task.id).value.tasks == []

    def test_team_sub_records(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value
        repo.add_team_member(project_id, "Ana")
        assert repo.add_team_member(project_id, " Ana ").value.team == ["Ana"]
        assert repo.remove_team_member(project_id, "Ana").value.team == []
        assert isinstance(repo.remove_team_member(project_id, "Ana"), Err)

    def test_create_rejects_blank_title(self, repo):
        result = repo.create(ProjectDraft(title="   ", due_date=date(2026, 6, 1)))
        assert isinstance(result, Err)
        assert repo.load_all().value == []

    def test_create_normalizes_draft(self, repo):
        draft = ProjectDraft(
            title="  Website ",
            due_date=date(2026, 6, 1),
            team=["Ana", " ", "Ana"],
            tasks=[Task(title="Ship", status=TaskStatus.COMPLETED)],
        )
        project = repo.get(repo.create(draft).value).value
        assert project.title == "Website"
        assert project.team == ["Ana"]
        assert project.tasks[0].completed_at is not None

    def test_update_rejects_blank_title(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value
        result = repo.update(project_id, ProjectDraft(title="", due_date=date(2026, 6, 1)))
        assert isinstance(result, Err)
        assert repo.get(project_id).value.title == "A"

    def test_blank_sub_records_are_rejected(self, repo):
        project_id = repo.create(ProjectDraft(title="A", due_date=date(2026, 6, 1))).value
        path = repo.projects_dir / f"{project_id}.json"
        before = path.read_text()

        assert isinstance(repo.add_team_member(project_id, "  "), Err)
        assert isinstance(repo.add_task(project_id, " "), Err)
        assert path.read_text() == before

    def test_failed_change_writes_nothing(self, repo):
        project = Project(id="p1", title="A", due_date=date(2026, 6, 1))
        repo.save(project)
        before = (repo.projects_dir / "p1.json").read_text()
        repo.delete_task("p1", "missing")
        assert (repo.projects_dir / "p1.json").read_text() == before
