"""Project management CLI commands.

Commands for creating, listing, editing and deleting projects and
their team membership.
"""

from typing import Optional

import typer

from pulseboard.application import (
    ViewState,
    create_project,
    update_project,
)
from pulseboard.domain.project import (
    CompletionBucket,
    DeadlineBucket,
    ProjectDraft,
    SortKey,
)
from pulseboard.infrastructure import LoggingNotifier, notify_quietly
from pulseboard.interfaces.cli.common import (
    STATUS_ICONS,
    build_view_state,
    console,
    get_repository,
    parse_date,
    print_info,
    print_success,
    project_table,
    unwrap_or_exit,
)

app = typer.Typer(help="Project management commands")

notifier = LoggingNotifier()


# =============================================================================
# Commands
# =============================================================================


@app.command("create")
def create(
    title: str = typer.Option(..., "--title", "-t", help="Project title"),
    due: str = typer.Option(..., "--due", "-d", help="Due date (YYYY-MM-DD)"),
    priority: int = typer.Option(3, "--priority", "-p", help="1 (most urgent) to 5"),
    description: str = typer.Option("", "--description", help="Free-text description"),
    member: Optional[list[str]] = typer.Option(
        None, "--member", "-m", help="Team member (repeatable)"
    ),
) -> None:
    """Create a new project.

    Example:
        pulseboard project create -t "Website" -d 2026-12-01 -m Ana -m Bruno
    """
    draft = ProjectDraft(
        title=title,
        description=description,
        due_date=parse_date(due),
        priority=priority,
        team=member or [],
    )
    project, _event = unwrap_or_exit(create_project(draft))

    repo = get_repository()
    unwrap_or_exit(repo.save(project), "Failed to save project: ")
    notify_quietly(notifier, project, "created")

    print_success(f"Created project: {project.title}")
    typer.echo(f"  ID: {project.id}")


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
    """List projects, filtered and sorted."""
    view = build_view_state(deadline, priority, completion, member, search, sort)
    projects = unwrap_or_exit(get_repository().load_all())
    visible = view.visible_projects(projects)

    if not visible:
        print_info("No projects match the current filters.")
        return

    console.print(project_table(visible, title=f"Projects ({len(visible)}/{len(projects)})"))


@app.command("show")
def show(
    project_id: str = typer.Argument(..., help="Project ID"),
    all_tasks: bool = typer.Option(False, "--all", "-a", help="Show every task"),
) -> None:
    """Show a project with its tasks."""
    project = unwrap_or_exit(get_repository().get(project_id))

    view = ViewState()
    if all_tasks:
        view = view.toggle_expanded(project.id)
    tasks, hidden = view.visible_tasks(project)

    console.print(f"[bold]{project.title}[/bold]  ({project.id})")
    if project.description:
        console.print(project.description)
    console.print(
        f"Due {project.due_date.isoformat()} | priority {project.priority} "
        f"| {project.progress}% complete"
    )
    console.print(f"Team: {', '.join(project.team) or '-'}")
    console.print()

    for task in tasks:
        assignees = ", ".join(task.assignees)
        due = f" (due {task.due_date.isoformat()})" if task.due_date else ""
        console.print(f"  {STATUS_ICONS[task.status]} {task.title}{due}  [dim]{task.id}[/dim]  {assignees}")
    if hidden:
        console.print(f"  [dim]+{hidden} more task(s), use --all to show[/dim]")
    if not project.tasks:
        console.print("  [dim]No tasks yet[/dim]")


@app.command("update")
def update(
    project_id: str = typer.Argument(..., help="Project ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t"),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
    priority: Optional[int] = typer.Option(None, "--priority", "-p"),
    description: Optional[str] = typer.Option(None, "--description"),
) -> None:
    """Update a project's fields."""
    repo = get_repository()
    project = unwrap_or_exit(repo.get(project_id))

    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if due is not None:
        changes["due_date"] = parse_date(due)
    if priority is not None:
        changes["priority"] = priority
    if description is not None:
        changes["description"] = description

    draft = ProjectDraft.from_project(project).model_copy(update=changes)
    updated, _event = unwrap_or_exit(update_project(project, draft))
    unwrap_or_exit(repo.save(updated), "Failed to save project: ")
    notify_quietly(notifier, updated, "updated")

    print_success(f"Updated project: {updated.title}")


@app.command("delete")
def delete(
    project_id: str = typer.Argument(..., help="Project ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a project and its tasks."""
    repo = get_repository()
    project = unwrap_or_exit(repo.get(project_id))

    if not yes:
        typer.confirm(f"Delete project '{project.title}'?", abort=True)

    unwrap_or_exit(repo.delete(project_id))
    print_success(f"Deleted project: {project.title}")


@app.command("add-member")
def add_member(
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str = typer.Argument(..., help="Team member name"),
) -> None:
    """Add a team member to a project."""
    updated = unwrap_or_exit(get_repository().add_team_member(project_id, name))
    notify_quietly(notifier, updated, "updated")
    print_success(f"Team: {', '.join(updated.team)}")


@app.command("remove-member")
def remove_member(
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str = typer.Argument(..., help="Team member name"),
) -> None:
    """Remove a team member from a project."""
    updated = unwrap_or_exit(get_repository().remove_team_member(project_id, name))
    notify_quietly(notifier, updated, "updated")
    print_success(f"Team: {', '.join(updated.team) or '-'}")
