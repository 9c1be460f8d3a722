"""Timeline domain - the 12-month x 4-week project grid.

Key Types:
    CellState - completed / in-progress / planned
    TimelineRow - one project's classified cells and task markers
    Timeline - month headers plus rows

Layout Functions:
    layout_timeline - lay out a list of projects
    layout_project - lay out a single project
    project_span - derived start date and length of a project bar
"""

from .layout import (
    GRID_CELLS,
    MAX_PROJECT_WEEKS,
    MIN_PROJECT_WEEKS,
    MONTHS,
    WEEKS_PER_MONTH,
    build_months,
    cell_dates,
    cell_for_date,
    classify_cell,
    layout_project,
    layout_timeline,
    place_markers,
    project_span,
)
from .models import CellState, TaskMarker, Timeline, TimelineMonth, TimelineRow

__all__ = [
    # Models
    "CellState",
    "TaskMarker",
    "Timeline",
    "TimelineMonth",
    "TimelineRow",
    # Constants
    "MONTHS",
    "WEEKS_PER_MONTH",
    "GRID_CELLS",
    "MIN_PROJECT_WEEKS",
    "MAX_PROJECT_WEEKS",
    # Layout
    "build_months",
    "cell_dates",
    "cell_for_date",
    "classify_cell",
    "project_span",
    "place_markers",
    "layout_project",
    "layout_timeline",
]
