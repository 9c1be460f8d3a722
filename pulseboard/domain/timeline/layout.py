"""Timeline layout engine.

Maps projects onto a fixed grid of 12 months x 4 week cells starting at
the current month, and places task markers on each project's row.
All functions are pure - no I/O, no side effects.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from pulseboard.domain.dates import add_months, as_date, month_start
from pulseboard.domain.project.models import Project

from .models import CellState, TaskMarker, Timeline, TimelineMonth, TimelineRow

# =============================================================================
# Grid Constants
# =============================================================================

MONTHS = 12
WEEKS_PER_MONTH = 4
GRID_CELLS = MONTHS * WEEKS_PER_MONTH
MIN_PROJECT_WEEKS = 4
MAX_PROJECT_WEEKS = 48
TASK_SPACING_WEEKS = 2


# =============================================================================
# Grid Construction
# =============================================================================


def build_months(today: date) -> list[TimelineMonth]:
    """Month headers for the 12 months starting at today's month."""
    first = month_start(today)
    months = []
    for index in range(MONTHS):
        start = add_months(first, index)
        months.append(TimelineMonth(index=index, start=start, label=start.strftime("%b %y")))
    return months


def cell_dates(today: date) -> list[date]:
    """Representative date of every cell, indexed month * 4 + week.

    Week w of a month is represented by day 1 + 7 * w (1, 8, 15, 22).
    """
    return [
        month.start + timedelta(weeks=week)
        for month in build_months(today)
        for week in range(WEEKS_PER_MONTH)
    ]


def cell_for_date(day: date, today: date) -> int | None:
    """Index of the cell covering `day`, or None outside the window.

    The last week cell of each month also covers the days after the
    22nd up to the month's end.
    """
    window_start = month_start(today)
    if day < window_start or day >= add_months(window_start, MONTHS):
        return None
    month = (day.year - window_start.year) * 12 + day.month - window_start.month
    week = min((day.day - 1) // 7, WEEKS_PER_MONTH - 1)
    return month * WEEKS_PER_MONTH + week


# =============================================================================
# Project Span
# =============================================================================


def project_span(due_date: date, today: date) -> tuple[date, int]:
    """Derive a project's start date and length in weeks.

    The length is the number of weeks from today until the due date
    (rounded up), clamped to 4-48 weeks. Projects already due get the
    4 week minimum ending on their due date.

    Returns:
        (start_date, duration_weeks)
    """
    days_ahead = (due_date - today).days
    weeks = -(-days_ahead // 7)
    weeks = max(MIN_PROJECT_WEEKS, min(MAX_PROJECT_WEEKS, weeks))
    return due_date - timedelta(weeks=weeks), weeks


def classify_cell(
    cell_date: date,
    start_date: date,
    due_date: date,
    today: date,
    progress_weeks: int,
) -> CellState | None:
    """Classify one cell of a project's row.

    Outside [start_date, due_date] -> None. Inside, the first
    `progress_weeks` weeks are completed; the rest are in-progress up to
    today and planned after it.
    """
    if cell_date < start_date or cell_date > due_date:
        return None
    weeks_from_start = (cell_date - start_date).days // 7
    if weeks_from_start < progress_weeks:
        return CellState.COMPLETED
    if cell_date <= today:
        return CellState.IN_PROGRESS
    return CellState.PLANNED


def place_markers(
    project: Project,
    start_date: date,
    today: date,
    dates: list[date] | None = None,
) -> list[TaskMarker]:
    """Place each task on the project's row.

    A task with a due date inside the window sits in the cell covering
    that date. Otherwise task i lands TASK_SPACING_WEEKS * i cells after
    the project's first cell; this spacing is a display heuristic, not a
    schedule. Markers falling past the grid are dropped.
    """
    dates = dates if dates is not None else cell_dates(today)
    start_cell = next((i for i, d in enumerate(dates) if d >= start_date), None)

    markers: list[TaskMarker] = []
    for index, task in enumerate(project.tasks):
        cell = cell_for_date(task.due_date, today) if task.due_date else None
        placed_by = "due_date"
        if cell is None:
            if start_cell is None:
                continue
            cell = start_cell + TASK_SPACING_WEEKS * index
            placed_by = "index"
        if cell >= GRID_CELLS:
            continue
        markers.append(
            TaskMarker(
                task_id=task.id,
                title=task.title,
                status=task.status,
                cell=cell,
                month=cell // WEEKS_PER_MONTH,
                week=cell % WEEKS_PER_MONTH,
                placed_by=placed_by,
            )
        )
    return markers


# =============================================================================
# Layout
# =============================================================================


def layout_project(
    project: Project,
    today: date | datetime,
    dates: list[date] | None = None,
) -> TimelineRow:
    """Lay out one project's bar and task markers.

    Args:
        project: Project to place
        today: Current date; anchors the window and the in-progress cutoff
        dates: Precomputed cell dates (shared across rows)

    Returns:
        TimelineRow with 48 classified cells and task markers
    """
    today = as_date(today)
    dates = dates if dates is not None else cell_dates(today)
    start_date, weeks = project_span(project.due_date, today)
    progress = project.progress
    progress_weeks = progress * weeks // 100

    cells = [
        classify_cell(cell_date, start_date, project.due_date, today, progress_weeks)
        for cell_date in dates
    ]
    return TimelineRow(
        project_id=project.id,
        title=project.title,
        progress=progress,
        start_date=start_date,
        due_date=project.due_date,
        duration_weeks=weeks,
        cells=cells,
        markers=place_markers(project, start_date, today, dates),
    )


def layout_timeline(
    projects: Iterable[Project],
    today: date | datetime | None = None,
) -> Timeline:
    """Lay out every project on a shared 12-month grid.

    Args:
        projects: Projects in display order
        today: Current date, defaults to the local date

    Returns:
        Timeline with month headers and one row per project
    """
    today = as_date(today) if today is not None else date.today()
    dates = cell_dates(today)
    return Timeline(
        today=today,
        months=build_months(today),
        rows=[layout_project(project, today, dates) for project in projects],
    )
