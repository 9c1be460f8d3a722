"""Dashboard CLI commands.

Aggregate statistics and the 12-month timeline view.
"""

from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from pulseboard.application import DashboardStats, compute_dashboard_stats
from pulseboard.domain.project import CompletionBucket, DeadlineBucket, SortKey
from pulseboard.domain.timeline import CellState, Timeline, TimelineRow, layout_timeline
from pulseboard.interfaces.cli.common import (
    build_view_state,
    console,
    get_repository,
    parse_date,
    print_info,
    unwrap_or_exit,
)

app = typer.Typer(help="Dashboard statistics and timeline")

CELL_GLYPHS = {
    CellState.COMPLETED: ("█", "green"),
    CellState.IN_PROGRESS: ("▓", "yellow"),
    CellState.PLANNED: ("░", "grey50"),
    None: ("·", "grey23"),
}

MARKER_GLYPHS = {
    "completed": ("✔", "green"),
    "in-progress": ("◐", "yellow"),
    "todo": ("○", "white"),
}


# =============================================================================
# Rendering
# =============================================================================


def stats_table(stats: DashboardStats) -> Table:
    table = Table(title="Dashboard", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Projects", str(stats.total_projects))
    table.add_row("Completed projects", str(stats.completed_projects))
    table.add_row("In-progress projects", str(stats.in_progress_projects))
    table.add_row("Team members", str(stats.team_members))
    table.add_row("Tasks to do", str(stats.todo_tasks))
    table.add_row("Tasks in progress", str(stats.in_progress_tasks))
    table.add_row("Tasks completed", f"{stats.completed_tasks}/{stats.total_tasks}")
    table.add_row("Overall progress", f"{stats.overall_progress}%")
    return table


def row_bar(row: TimelineRow) -> Text:
    """One character per week cell, grouped by month."""
    bar = Text()
    for index, state in enumerate(row.cells):
        if index and index % 4 == 0:
            bar.append("|", style="grey35")
        glyph, style = CELL_GLYPHS[state]
        bar.append(glyph, style=style)
    return bar


def marker_line(row: TimelineRow) -> Text:
    """Task markers aligned under the bar; the first marker in a cell wins."""
    slots: dict[int, tuple[str, str]] = {}
    for marker in row.markers:
        slots.setdefault(marker.cell, MARKER_GLYPHS[marker.status.value])

    line = Text()
    for index in range(len(row.cells)):
        if index and index % 4 == 0:
            line.append(" ")
        glyph, style = slots.get(index, (" ", ""))
        line.append(glyph, style=style)
    return line


def timeline_table(timeline: Timeline) -> Table:
    header = " ".join(month.label.ljust(4)[:4] for month in timeline.months)
    table = Table(title=f"Timeline from {timeline.months[0].label}")
    table.add_column("Project", style="bold")
    table.add_column("Progress", justify="right")
    table.add_column(header, no_wrap=True)
    for row in timeline.rows:
        bar = row_bar(row)
        bar.append("\n")
        bar.append_text(marker_line(row))
        table.add_row(row.title, f"{row.progress}%", bar)
    return table


# =============================================================================
# Commands
# =============================================================================


@app.command("stats")
def stats() -> None:
    """Show totals across every project."""
    projects = unwrap_or_exit(get_repository().load_all())
    console.print(stats_table(compute_dashboard_stats(projects)))


@app.command("timeline")
def timeline(
    deadline: DeadlineBucket = typer.Option(DeadlineBucket.ALL, "--deadline", help="Deadline bucket"),
    priority: str = typer.Option("all", "--priority", "-p", help="'all' or 1-5"),
    completion: CompletionBucket = typer.Option(
        CompletionBucket.ALL, "--completion", help="Completion bucket"
    ),
    member: str = typer.Option("", "--member", "-m", help="Only projects with this team member"),
    search: str = typer.Option("", "--search", "-s", help="Match title or description"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort order"),
    today: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
) -> None:
    """Show the 12-month timeline for the filtered projects."""
    reference = parse_date(today)
    view = build_view_state(deadline, priority, completion, member, search, sort)
    projects = unwrap_or_exit(get_repository().load_all())
    visible = view.visible_projects(projects, reference)

    if not visible:
        print_info("No projects match the current filters.")
        return

    console.print(timeline_table(layout_timeline(visible, reference)))
