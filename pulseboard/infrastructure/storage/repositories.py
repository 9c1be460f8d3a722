"""Project repository - the persistence collaborator.

Stores one JSON document per project under `<data_dir>/projects/`.
Every call is all-or-nothing and returns a Result; callers reload the
snapshot after a mutation rather than patching their own copy.

Mutations go through the project service functions, so a record
written here passes the same checks as one written by the CLI or API.
"""

import logging
import re
from collections.abc import Callable
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pulseboard.application import project_service
from pulseboard.domain.project.models import Project, ProjectDraft
from pulseboard.domain.shared.result import Err, Ok, Result, flat_map, is_ok, unwrap_or
from pulseboard.domain.task.models import TaskStatus
from pulseboard.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

_PROJECT_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class ProjectRepository:
    """Repository for project persistence.

    Documents keep a `created_at` stamp next to the project fields so
    listings come back newest first. The derived `progress` is written
    for readers of the raw files but ignored when loading.
    """

    def __init__(self, data_dir: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            data_dir: Root data directory; projects live in its `projects/` folder.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.projects_dir = Path(data_dir) / "projects"
        self._storage = storage or JsonStorage()

    # =========================================================================
    # Paths
    # =========================================================================

    def _project_file(self, project_id: str) -> Result[Path, str]:
        if not _PROJECT_ID_RE.match(project_id or ""):
            return Err(f"Invalid project id: {project_id!r}")
        return Ok(self.projects_dir / f"{project_id}.json")

    # =========================================================================
    # Queries
    # =========================================================================

    def load_all(self) -> Result[list[Project], str]:
        """Load every stored project, newest first.

        Unreadable or invalid documents are skipped with a warning.

        Returns:
            Ok(list[Project]), or Err(str) if the directory cannot be read.
        """
        files = self._storage.list_documents(self.projects_dir)
        if isinstance(files, Err):
            return files

        loaded: list[tuple[str, Project]] = []
        for path in files.value:
            result = self._storage.load_json(path)
            if isinstance(result, Err):
                logger.warning(f"Skipping unreadable project file: {result.error}")
                continue
            try:
                project = Project(**result.value)
            except ValidationError as e:
                logger.warning(f"Skipping invalid project file {path.name}: {e}")
                continue
            loaded.append((str(result.value.get("created_at", "")), project))

        loaded.sort(key=lambda item: item[0], reverse=True)
        return Ok([project for _, project in loaded])

    def get(self, project_id: str) -> Result[Project, str]:
        """Get a project by id.

        Returns:
            Ok(Project) if found and valid, Err(str) otherwise.
        """
        path = self._project_file(project_id)
        if isinstance(path, Err):
            return path

        result = self._storage.load_json(path.value)
        if isinstance(result, Err):
            return Err(f"Project not found: {project_id}")

        try:
            return Ok(Project(**result.value))
        except ValidationError as e:
            return Err(f"Invalid project data for {project_id}: {e}")

    def exists(self, project_id: str) -> bool:
        path = self._project_file(project_id)
        return is_ok(path) and path.value.exists()

    # =========================================================================
    # Mutations
    # =========================================================================

    def save(self, project: Project) -> Result[None, str]:
        """Write a project, creating or replacing its document.

        The original `created_at` stamp is preserved on replace.
        """
        path = self._project_file(project.id)
        if isinstance(path, Err):
            return path

        existing = unwrap_or(self._storage.load_json(path.value), {})
        document: dict[str, Any] = project.model_dump(mode="json")
        document["created_at"] = existing.get("created_at", datetime.now(UTC).isoformat())

        logger.debug(f"Saving project {project.id} ({project.progress}%)")
        return self._storage.save_json(path.value, document)

    def create(self, draft: ProjectDraft) -> Result[str, str]:
        """Validate and store a new project built from a draft.

        Returns:
            Ok(project_id) of the new record, or Err(str).
        """
        created = project_service.create_project(draft)
        if isinstance(created, Err):
            return created

        project, _event = created.value
        return flat_map(self.save(project), lambda _: Ok(project.id))

    def update(self, project_id: str, draft: ProjectDraft) -> Result[Project, str]:
        """Replace an existing project's fields with a validated draft."""

        def replace(project: Project) -> Result[Project, str]:
            return _drop_event(project_service.update_project(project, draft))

        return self._modify(project_id, replace)

    def delete(self, project_id: str) -> Result[None, str]:
        """Delete a project document."""
        path = self._project_file(project_id)
        if isinstance(path, Err):
            return path
        if not path.value.exists():
            return Err(f"Project not found: {project_id}")
        return self._storage.delete(path.value)

    # =========================================================================
    # Task / Team Sub-records
    # =========================================================================

    def _modify(
        self,
        project_id: str,
        change: Callable[[Project], Result[Project, str]],
    ) -> Result[Project, str]:
        """Load, change and save one project as a single call."""
        changed = flat_map(self.get(project_id), change)
        return flat_map(changed, lambda project: flat_map(self.save(project), lambda _: Ok(project)))

    def add_task(
        self,
        project_id: str,
        title: str,
        assignees: list[str] | None = None,
        due_date: date | None = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Result[Project, str]:
        return self._modify(
            project_id,
            lambda project: _drop_event(
                project_service.add_task(project, title, assignees, due_date, status)
            ),
        )

    def set_task_status(
        self,
        project_id: str,
        task_id: str,
        status: TaskStatus,
    ) -> Result[Project, str]:
        return self._modify(
            project_id,
            lambda project: _drop_event(
                project_service.change_task_status(project, task_id, status)
            ),
        )

    def delete_task(self, project_id: str, task_id: str) -> Result[Project, str]:
        return self._modify(project_id, lambda project: project_service.remove_task(project, task_id))

    def add_team_member(self, project_id: str, name: str) -> Result[Project, str]:
        return self._modify(project_id, lambda project: project_service.add_team_member(project, name))

    def remove_team_member(self, project_id: str, name: str) -> Result[Project, str]:
        return self._modify(
            project_id, lambda project: project_service.remove_team_member(project, name)
        )


def _drop_event(result: Result[tuple[Project, Any], str]) -> Result[Project, str]:
    return flat_map(result, lambda pair: Ok(pair[0]))
