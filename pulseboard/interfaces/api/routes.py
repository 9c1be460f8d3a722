"""FastAPI routes for Pulseboard.

The repository, notifier and save coordinator live on `app.state` so
tests can build an app around a temporary data directory.
"""

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from pulseboard import __version__
from pulseboard.application import (
    DashboardStats,
    SaveCoordinator,
    ViewState,
    add_task,
    add_team_member,
    compute_dashboard_stats,
    create_project,
    remove_team_member,
    update_project,
)
from pulseboard.config import get_settings
from pulseboard.domain.project import (
    CompletionBucket,
    DeadlineBucket,
    Project,
    ProjectDraft,
    ProjectFilters,
)
from pulseboard.domain.shared import Result, is_err
from pulseboard.domain.timeline import Timeline, layout_timeline
from pulseboard.infrastructure import LoggingNotifier, Notifier, ProjectRepository, notify_quietly
from pulseboard.infrastructure.notifications import NotifyAction
from pulseboard.interfaces.api.schemas import (
    AddTaskRequest,
    TeamMemberRequest,
    UpdateStatusRequest,
)

router = APIRouter(prefix="/api")


# =============================================================================
# Helpers
# =============================================================================


def _repo(request: Request) -> ProjectRepository:
    return request.app.state.repository


def _notify(request: Request, project: Project, action: NotifyAction) -> None:
    notify_quietly(request.app.state.notifier, project, action)


def _unwrap(result: Result, status_code: int = 400):
    if is_err(result):
        raise HTTPException(status_code=status_code, detail=result.error)
    return result.value


def _load_project(request: Request, project_id: str) -> Project:
    return _unwrap(_repo(request).get(project_id), status_code=404)


def _save(request: Request, project: Project) -> None:
    _unwrap(_repo(request).save(project), status_code=500)


def _visible_projects(
    request: Request,
    deadline: DeadlineBucket,
    priority: str,
    completion: CompletionBucket,
    team_member: str,
    search: str,
    sort: Optional[str],
    today: Optional[date],
) -> list[Project]:
    try:
        filters = ProjectFilters(
            deadline=deadline,
            priority=priority,
            completion=completion,
            team_member=team_member,
            search=search,
        )
    except ValidationError:
        raise HTTPException(status_code=400, detail="Priority must be 'all' or 1-5")

    projects = _unwrap(_repo(request).load_all(), status_code=500)
    return ViewState(filters=filters).with_sort(sort).visible_projects(projects, today)


# =============================================================================
# Project Management
# =============================================================================


@router.get("/projects", response_model=list[Project])
def list_projects(
    request: Request,
    deadline: DeadlineBucket = DeadlineBucket.ALL,
    priority: str = "all",
    completion: CompletionBucket = CompletionBucket.ALL,
    team_member: str = "",
    search: str = "",
    sort: Optional[str] = None,
    today: Optional[date] = None,
):
    """List projects, filtered and sorted."""
    return _visible_projects(request, deadline, priority, completion, team_member, search, sort, today)


@router.post("/projects", response_model=Project, status_code=201)
def create_project_route(request: Request, draft: ProjectDraft):
    """Create a new project."""
    project, _event = _unwrap(create_project(draft))
    _save(request, project)
    _notify(request, project, "created")
    return project


@router.get("/projects/{project_id}", response_model=Project)
def get_project(request: Request, project_id: str):
    """Get a project by ID."""
    return _load_project(request, project_id)


@router.put("/projects/{project_id}", response_model=Project)
def update_project_route(request: Request, project_id: str, draft: ProjectDraft):
    """Replace a project's fields."""
    project = _load_project(request, project_id)
    updated, _event = _unwrap(update_project(project, draft))
    _save(request, updated)
    _notify(request, updated, "updated")
    return updated


@router.delete("/projects/{project_id}")
def delete_project(request: Request, project_id: str):
    """Delete a project."""
    _unwrap(_repo(request).delete(project_id), status_code=404)
    return {"status": "deleted"}


# =============================================================================
# Tasks and Team
# =============================================================================


@router.post("/projects/{project_id}/tasks", response_model=Project, status_code=201)
def add_task_route(request: Request, project_id: str, req: AddTaskRequest):
    """Append a task to a project."""
    project = _load_project(request, project_id)
    updated, _event = _unwrap(
        add_task(project, req.title, req.assignees, req.due_date, req.status)
    )
    _save(request, updated)
    _notify(request, updated, "updated")
    return updated


@router.patch("/projects/{project_id}/tasks/{task_id}", response_model=Project)
def update_task_status(request: Request, project_id: str, task_id: str, req: UpdateStatusRequest):
    """Move a task to a new status.

    Returns 409 while another save for the same project is in flight.
    """
    coordinator: SaveCoordinator = request.app.state.coordinator
    if coordinator.is_saving(project_id):
        raise HTTPException(status_code=409, detail="A save for this project is already in progress")

    project = _unwrap(coordinator.refresh(project_id), status_code=404)
    if project.find_task(task_id) is None:
        raise HTTPException(status_code=404, detail=f"Task not found: {task_id}")

    updated = _unwrap(coordinator.set_task_status(project_id, task_id, req.status), status_code=409)
    _notify(request, updated, "updated")
    return updated


@router.delete("/projects/{project_id}/tasks/{task_id}", response_model=Project)
def delete_task(request: Request, project_id: str, task_id: str):
    """Remove a task from a project."""
    updated = _unwrap(_repo(request).delete_task(project_id, task_id), status_code=404)
    _notify(request, updated, "updated")
    return updated


@router.post("/projects/{project_id}/team", response_model=Project)
def add_member(request: Request, project_id: str, req: TeamMemberRequest):
    """Add a team member."""
    project = _load_project(request, project_id)
    updated = _unwrap(add_team_member(project, req.name))
    _save(request, updated)
    _notify(request, updated, "updated")
    return updated


@router.delete("/projects/{project_id}/team/{name}", response_model=Project)
def remove_member(request: Request, project_id: str, name: str):
    """Remove a team member."""
    project = _load_project(request, project_id)
    updated = _unwrap(remove_team_member(project, name), status_code=404)
    _save(request, updated)
    _notify(request, updated, "updated")
    return updated


# =============================================================================
# Dashboard
# =============================================================================


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(request: Request):
    """Totals across every project."""
    projects = _unwrap(_repo(request).load_all(), status_code=500)
    return compute_dashboard_stats(projects)


@router.get("/timeline", response_model=Timeline)
def timeline(
    request: Request,
    deadline: DeadlineBucket = DeadlineBucket.ALL,
    priority: str = "all",
    completion: CompletionBucket = CompletionBucket.ALL,
    team_member: str = "",
    search: str = "",
    sort: Optional[str] = None,
    today: Optional[date] = None,
):
    """12-month timeline for the filtered projects."""
    visible = _visible_projects(request, deadline, priority, completion, team_member, search, sort, today)
    return layout_timeline(visible, today)


# =============================================================================
# App Factory
# =============================================================================


def create_app(
    data_dir: Path | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        data_dir: Project data directory; defaults to the configured one.
        notifier: Notification collaborator; defaults to LoggingNotifier.
    """
    app = FastAPI(
        title="Pulseboard",
        description="Project progress dashboard",
        version=__version__,
    )

    # CORS for the web frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = ProjectRepository(data_dir or get_settings().resolved_data_dir())
    app.state.repository = repository
    app.state.notifier = notifier or LoggingNotifier()
    app.state.coordinator = SaveCoordinator(repository)

    app.include_router(router)

    @app.get("/")
    def root():
        return {"name": "Pulseboard", "version": __version__}

    return app
