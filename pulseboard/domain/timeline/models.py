"""Timeline grid models.

Display-ready values produced by the layout engine. Pure data.
"""

from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from pulseboard.domain.task.models import TaskStatus


class CellState(str, Enum):
    """Classification of a week cell inside a project's bar."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNED = "planned"


class TimelineMonth(BaseModel):
    """Header for one month column of the grid."""

    index: int
    start: date
    label: str


class TaskMarker(BaseModel):
    """Where a task is drawn on its project's row.

    `placed_by` records whether the cell came from the task's own due
    date or from the index-spacing display heuristic.
    """

    task_id: str
    title: str
    status: TaskStatus
    cell: int
    month: int
    week: int
    placed_by: Literal["due_date", "index"]


class TimelineRow(BaseModel):
    """One project's bar: 48 cells (None = outside the project span)."""

    project_id: str
    title: str
    progress: int
    start_date: date
    due_date: date
    duration_weeks: int
    cells: list[CellState | None]
    markers: list[TaskMarker] = Field(default_factory=list)


class Timeline(BaseModel):
    """The full 12-month x 4-week grid for a set of projects."""

    today: date
    months: list[TimelineMonth]
    rows: list[TimelineRow] = Field(default_factory=list)
