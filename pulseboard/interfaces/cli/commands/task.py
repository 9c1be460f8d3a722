"""Task management CLI commands.

Commands for adding tasks to a project and moving them between
statuses. Status changes go through the save coordinator so the
reported progress is the one actually stored.
"""

from typing import Optional

import typer

from pulseboard.application import SaveCoordinator, add_task
from pulseboard.domain.task import TaskStatus
from pulseboard.infrastructure import LoggingNotifier, notify_quietly
from pulseboard.interfaces.cli.common import (
    get_repository,
    parse_date,
    print_success,
    unwrap_or_exit,
)

app = typer.Typer(help="Task management commands")

notifier = LoggingNotifier()


@app.command("add")
def add(
    project_id: str = typer.Argument(..., help="Project ID"),
    title: str = typer.Argument(..., help="Task title"),
    assignee: Optional[list[str]] = typer.Option(
        None, "--assignee", "-a", help="Assignee (repeatable)"
    ),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
    status: TaskStatus = typer.Option(TaskStatus.TODO, "--status", "-s", help="Initial status"),
) -> None:
    """Add a task to a project.

    Example:
        pulseboard task add 3f2a... "Write landing copy" -a Ana --due 2026-11-20
    """
    repo = get_repository()
    project = unwrap_or_exit(repo.get(project_id))

    updated, event = unwrap_or_exit(
        add_task(project, title, assignees=assignee or [], due_date=parse_date(due), status=status)
    )
    unwrap_or_exit(repo.save(updated), "Failed to save task: ")
    notify_quietly(notifier, updated, "updated")

    print_success(f"Added task: {event.title}")
    typer.echo(f"  ID: {event.task_id}")
    typer.echo(f"  Project progress: {updated.progress}%")


@app.command("status")
def status(
    project_id: str = typer.Argument(..., help="Project ID"),
    task_id: str = typer.Argument(..., help="Task ID"),
    new_status: TaskStatus = typer.Argument(..., help="todo, in-progress or completed"),
) -> None:
    """Move a task to a new status."""
    coordinator = SaveCoordinator(get_repository())
    unwrap_or_exit(coordinator.refresh(project_id))

    updated = unwrap_or_exit(coordinator.set_task_status(project_id, task_id, new_status))
    notify_quietly(notifier, updated, "updated")

    print_success(f"Task {task_id} is now {new_status.value}")
    typer.echo(f"  Project progress: {updated.progress}%")


@app.command("remove")
def remove(
    project_id: str = typer.Argument(..., help="Project ID"),
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Remove a task from a project."""
    updated = unwrap_or_exit(get_repository().delete_task(project_id, task_id))
    notify_quietly(notifier, updated, "updated")
    print_success(f"Removed task {task_id}")
    typer.echo(f"  Project progress: {updated.progress}%")
