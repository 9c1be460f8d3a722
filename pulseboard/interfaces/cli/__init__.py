"""CLI interface for Pulseboard using Typer.

Usage:
    pulseboard project create -t "Website" -d 2026-12-01
    pulseboard list --completion in-progress --sort progress
    pulseboard task status <project-id> <task-id> completed
    pulseboard stats
    pulseboard timeline

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (project, task, dashboard)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from pulseboard import __version__
from pulseboard.domain.project import CompletionBucket, DeadlineBucket, SortKey
from pulseboard.interfaces.cli.commands import dashboard, project, task

app = typer.Typer(
    name="pulseboard",
    help="Project progress dashboard",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pulseboard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Pulseboard - projects, tasks, progress and a 12-month timeline."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(project.app, name="project")
app.add_typer(task.app, name="task")
app.add_typer(dashboard.app, name="dashboard")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("list")
def list_projects(
    deadline: DeadlineBucket = typer.Option(DeadlineBucket.ALL, "--deadline", help="Deadline bucket"),
    priority: str = typer.Option("all", "--priority", "-p", help="'all' or 1-5"),
    completion: CompletionBucket = typer.Option(
        CompletionBucket.ALL, "--completion", help="Completion bucket"
    ),
    member: str = typer.Option("", "--member", "-m", help="Only projects with this team member"),
    search: str = typer.Option("", "--search", "-s", help="Match title or description"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort order"),
) -> None:
    """List projects (shortcut for 'project list')."""
    project.list_projects(
        deadline=deadline,
        priority=priority,
        completion=completion,
        member=member,
        search=search,
        sort=sort,
    )


@app.command("stats")
def stats() -> None:
    """Show dashboard totals (shortcut for 'dashboard stats')."""
    dashboard.stats()


@app.command("timeline")
def timeline(
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort order"),
    today: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
) -> None:
    """Show the timeline (shortcut for 'dashboard timeline')."""
    dashboard.timeline(
        deadline=DeadlineBucket.ALL,
        priority="all",
        completion=CompletionBucket.ALL,
        member="",
        search="",
        sort=sort,
        today=today,
    )


__all__ = ["app"]
