"""Project application service.

Orchestrates project and task lifecycle operations by combining domain
functions. All functions are pure - no I/O, no side effects. Each
returns the updated Project (a new object) together with the domain
event describing the change.
"""

from datetime import date, datetime

from pulseboard.domain.project import (
    Project,
    ProjectCreated,
    ProjectDraft,
    ProjectUpdated,
    unique_names,
)
from pulseboard.domain.shared import Err, Ok, Result
from pulseboard.domain.task import (
    Task,
    TaskAdded,
    TaskCompleted,
    TaskStatus,
    TaskStatusChanged,
    set_task_status,
)

MIN_PRIORITY = 1
MAX_PRIORITY = 5


def settle_tasks(
    tasks: list[Task],
    previous: list[Task] | None = None,
    now: datetime | None = None,
) -> list[Task]:
    """Run submitted tasks through the status-transition rule.

    A task whose id matches one in `previous` starts from the stored
    task, so an already-completed task keeps its stamp and a reopened
    one loses it. Other tasks start from their submitted fields.
    """
    stored = {task.id: task for task in previous or []}
    settled = []
    for task in tasks:
        before = stored.get(task.id)
        start = task
        if before is not None:
            start = task.model_copy(
                update={"status": before.status, "completed_at": before.completed_at}
            )
        settled.append(set_task_status(start, task.status, now))
    return settled


def validate_draft(
    draft: ProjectDraft,
    previous: Project | None = None,
) -> Result[ProjectDraft, str]:
    """Check the fields a form submission must get right.

    Args:
        draft: Submitted project fields.
        previous: Stored project when the draft updates one.

    Returns:
        Ok(draft) with title, team and task stamps normalized, or Err(str).
    """
    if not draft.title or not draft.title.strip():
        return Err("Project title cannot be empty")

    if not MIN_PRIORITY <= draft.priority <= MAX_PRIORITY:
        return Err(f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}")

    team = unique_names([name.strip() for name in draft.team if name.strip()])
    tasks = settle_tasks(draft.tasks, previous.tasks if previous else None)
    return Ok(
        draft.model_copy(update={"title": draft.title.strip(), "team": team, "tasks": tasks})
    )


def create_project(
    draft: ProjectDraft,
    project_id: str | None = None,
) -> Result[tuple[Project, ProjectCreated], str]:
    """Create a new project from a draft.

    Args:
        draft: Submitted project fields.
        project_id: Explicit id; a new uuid is generated when omitted.

    Returns:
        Ok((Project, ProjectCreated)) on success, or
        Err(str) with the validation error.
    """
    checked = validate_draft(draft)
    if isinstance(checked, Err):
        return checked

    fields = checked.value.model_dump()
    project = Project(id=project_id, **fields) if project_id else Project(**fields)

    event = ProjectCreated(project_id=project.id, title=project.title)
    return Ok((project, event))


def update_project(
    project: Project,
    draft: ProjectDraft,
) -> Result[tuple[Project, ProjectUpdated], str]:
    """Replace a project's editable fields, keeping its id.

    Returns:
        Ok((Project, ProjectUpdated)) on success, or Err(str).
    """
    checked = validate_draft(draft, previous=project)
    if isinstance(checked, Err):
        return checked

    updated = Project(id=project.id, **checked.value.model_dump())
    return Ok((updated, _updated_event(updated)))


def add_task(
    project: Project,
    title: str,
    assignees: list[str] | None = None,
    due_date: date | None = None,
    status: TaskStatus = TaskStatus.TODO,
) -> Result[tuple[Project, TaskAdded], str]:
    """Append a task to the end of a project's task list.

    Progress follows automatically since it is derived from the list.

    Returns:
        Ok((Project, TaskAdded)) on success, or Err(str) for an empty title.
    """
    if not title or not title.strip():
        return Err("Task title cannot be empty")

    task = set_task_status(
        Task(title=title.strip(), assignees=list(assignees or []), due_date=due_date),
        status,
    )
    updated = project.model_copy(update={"tasks": [*project.tasks, task]})

    event = TaskAdded(project_id=project.id, task_id=task.id, title=task.title)
    return Ok((updated, event))


def change_task_status(
    project: Project,
    task_id: str,
    status: TaskStatus,
    now: datetime | None = None,
) -> Result[tuple[Project, TaskCompleted | TaskStatusChanged], str]:
    """Move one task to a new status.

    Applies the completed_at transition rule and emits TaskCompleted when
    the task enters COMPLETED, TaskStatusChanged otherwise.

    Returns:
        Ok((Project, event)) on success, or Err(str) if the task is unknown.
    """
    task = project.find_task(task_id)
    if task is None:
        return Err(f"Task not found: {task_id}")

    moved = set_task_status(task, status, now)
    tasks = [moved if t.id == task_id else t for t in project.tasks]
    updated = project.model_copy(update={"tasks": tasks})

    event: TaskCompleted | TaskStatusChanged
    if moved.status == TaskStatus.COMPLETED and task.status != TaskStatus.COMPLETED:
        event = TaskCompleted(
            project_id=project.id,
            task_id=task_id,
            title=task.title,
            progress=updated.progress,
        )
    else:
        event = TaskStatusChanged(
            project_id=project.id,
            task_id=task_id,
            previous=task.status,
            current=moved.status,
            progress=updated.progress,
        )
    return Ok((updated, event))


def remove_task(project: Project, task_id: str) -> Result[Project, str]:
    """Drop one task; progress follows from the shorter list."""
    if project.find_task(task_id) is None:
        return Err(f"Task not found: {task_id}")
    return Ok(project.model_copy(update={"tasks": [t for t in project.tasks if t.id != task_id]}))


def add_team_member(project: Project, name: str) -> Result[Project, str]:
    """Add a person to the team; adding an existing member is a no-op."""
    name = name.strip()
    if not name:
        return Err("Team member name cannot be empty")
    return Ok(project.model_copy(update={"team": unique_names([*project.team, name])}))


def remove_team_member(project: Project, name: str) -> Result[Project, str]:
    if name not in project.team:
        return Err(f"{name} is not on the team of {project.title}")
    return Ok(project.model_copy(update={"team": [m for m in project.team if m != name]}))


def _updated_event(project: Project) -> ProjectUpdated:
    return ProjectUpdated(project_id=project.id, title=project.title, progress=project.progress)
