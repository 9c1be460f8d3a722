"""Shared utilities for Pulseboard CLI commands.

This module provides common utilities used across CLI commands:
- Repository construction from the user settings
- Formatted output helpers (error, success, info)
- Result unwrapping with a non-zero exit on errors
- Shared filter/sort option handling
- Rich tables for project listings
"""

from datetime import date
from typing import TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from pulseboard.application import ViewState
from pulseboard.config import get_settings
from pulseboard.domain.project import (
    CompletionBucket,
    DeadlineBucket,
    Project,
    ProjectFilters,
    SortKey,
)
from pulseboard.domain.shared import Result, is_err
from pulseboard.domain.task import TaskStatus
from pulseboard.infrastructure import ProjectRepository

T = TypeVar("T")

console = Console()

STATUS_ICONS = {
    TaskStatus.COMPLETED: "[green]✔[/green]",
    TaskStatus.IN_PROGRESS: "[yellow]◐[/yellow]",
    TaskStatus.TODO: "[dim]○[/dim]",
}


def get_repository() -> ProjectRepository:
    """Build the project repository for the configured data directory."""
    return ProjectRepository(get_settings().resolved_data_dir())


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def unwrap_or_exit(result: Result[T, str], prefix: str = "") -> T:
    """Return the Ok value, or print the error and exit with status 1."""
    if is_err(result):
        print_error(f"{prefix}{result.error}")
        raise typer.Exit(1)
    return result.value


def parse_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD option value."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Expected a YYYY-MM-DD date, got {value!r}")


def build_view_state(
    deadline: DeadlineBucket = DeadlineBucket.ALL,
    priority: str = "all",
    completion: CompletionBucket = CompletionBucket.ALL,
    member: str = "",
    search: str = "",
    sort: SortKey | None = None,
) -> ViewState:
    """Turn listing options into a ViewState.

    Raises:
        typer.BadParameter: If the priority is not 'all' or 1-5.
    """
    try:
        filters = ProjectFilters(
            deadline=deadline,
            priority=priority,
            completion=completion,
            team_member=member,
            search=search,
        )
    except ValidationError:
        raise typer.BadParameter(f"Priority must be 'all' or 1-5, got {priority!r}")
    # Without --sort, fall back to the configured default ordering
    return ViewState(filters=filters).with_sort(sort or get_settings().default_sort)


def project_table(projects: list[Project], title: str = "Projects") -> Table:
    """Rich table with one row per project."""
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Due", no_wrap=True)
    table.add_column("Priority", justify="center")
    table.add_column("Progress", justify="right")
    table.add_column("Tasks", justify="right")
    table.add_column("Team")

    for project in projects:
        done = sum(1 for t in project.tasks if t.status == TaskStatus.COMPLETED)
        table.add_row(
            project.id,
            project.title,
            project.due_date.isoformat(),
            str(project.priority),
            f"{project.progress}%",
            f"{done}/{len(project.tasks)}",
            ", ".join(project.team),
        )
    return table


__all__ = [
    "console",
    "STATUS_ICONS",
    "get_repository",
    "print_error",
    "print_success",
    "print_info",
    "unwrap_or_exit",
    "parse_date",
    "build_view_state",
    "project_table",
]
