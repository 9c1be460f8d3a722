"""Write-through save coordinator.

Gives instant feedback for local edits (such as toggling a task's
status) without letting the local copy drift from the store:

1. the change is applied to the local snapshot immediately,
2. one save per project may be in flight; a second is refused,
3. on success the local copy is overwritten with the stored record,
4. on failure the local copy goes back to the last confirmed record.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from pulseboard.application.project_service import change_task_status
from pulseboard.domain.project import Project
from pulseboard.domain.shared import Err, Ok, Result, unwrap_or
from pulseboard.domain.task import TaskStatus

logger = logging.getLogger(__name__)

ProjectChange = Callable[[Project], Result[Project, str]]


class ProjectStore(Protocol):
    """The slice of the persistence collaborator the coordinator needs."""

    def load_all(self) -> Result[list[Project], str]: ...

    def get(self, project_id: str) -> Result[Project, str]: ...

    def save(self, project: Project) -> Result[None, str]: ...


class SaveCoordinator:
    """Local project snapshot with serialized per-project saves.

    Example:
        coordinator = SaveCoordinator(ProjectRepository(data_dir))
        coordinator.load()
        result = coordinator.set_task_status(project_id, task_id, TaskStatus.COMPLETED)
    """

    def __init__(self, store: ProjectStore) -> None:
        self._store = store
        self._lock = threading.Lock()
        self._order: list[str] = []
        self._local: dict[str, Project] = {}
        self._confirmed: dict[str, Project] = {}
        self._in_flight: set[str] = set()

    # =========================================================================
    # Snapshot
    # =========================================================================

    def load(self) -> Result[list[Project], str]:
        """Replace the local snapshot with the store's current records."""
        result = self._store.load_all()
        if isinstance(result, Err):
            return result

        with self._lock:
            self._order = [p.id for p in result.value]
            self._local = {p.id: p for p in result.value}
            self._confirmed = dict(self._local)
        return Ok(self.snapshot())

    def refresh(self, project_id: str) -> Result[Project, str]:
        """Reload one project from the store unless a save for it is in flight."""
        if self.is_saving(project_id):
            return Err(f"A save for project {project_id} is already in progress")

        result = self._store.get(project_id)
        if isinstance(result, Err):
            return result

        with self._lock:
            if project_id not in self._order:
                self._order.append(project_id)
            self._local[project_id] = result.value
            self._confirmed[project_id] = result.value
        return result

    def snapshot(self) -> list[Project]:
        """Local projects in load order, including unsaved edits."""
        with self._lock:
            return [self._local[pid] for pid in self._order if pid in self._local]

    def local(self, project_id: str) -> Project | None:
        with self._lock:
            return self._local.get(project_id)

    def is_saving(self, project_id: str) -> bool:
        with self._lock:
            return project_id in self._in_flight

    # =========================================================================
    # Commands
    # =========================================================================

    def apply(self, project_id: str, change: ProjectChange) -> Result[Project, str]:
        """Apply a change locally and write it through to the store.

        Args:
            project_id: Project to change.
            change: Function producing the changed project (or Err).

        Returns:
            Ok(stored project) on success; Err(str) if the project is
            unknown, a save for it is already in flight, the change is
            rejected, or the store fails.
        """
        with self._lock:
            if project_id in self._in_flight:
                return Err(f"A save for project {project_id} is already in progress")
            current = self._local.get(project_id)
            if current is None:
                return Err(f"Project not found: {project_id}")

            changed = change(current)
            if isinstance(changed, Err):
                return changed

            self._local[project_id] = changed.value
            self._in_flight.add(project_id)

        try:
            saved = self._store.save(changed.value)
            if isinstance(saved, Err):
                logger.warning(f"Save failed for project {project_id}, reverting: {saved.error}")
                with self._lock:
                    self._local[project_id] = self._confirmed[project_id]
                return saved

            # Reconcile with what the store actually holds
            confirmed = unwrap_or(self._store.get(project_id), changed.value)
            with self._lock:
                self._local[project_id] = confirmed
                self._confirmed[project_id] = confirmed
            return Ok(confirmed)
        finally:
            with self._lock:
                self._in_flight.discard(project_id)

    def set_task_status(
        self,
        project_id: str,
        task_id: str,
        status: TaskStatus,
        now: datetime | None = None,
    ) -> Result[Project, str]:
        """Toggle a task's status with instant local feedback."""

        def transition(project: Project) -> Result[Project, str]:
            result = change_task_status(project, task_id, status, now)
            if isinstance(result, Err):
                return result
            updated, _event = result.value
            return Ok(updated)

        return self.apply(project_id, transition)
