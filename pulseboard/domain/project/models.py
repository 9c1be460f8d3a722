"""Project domain models.

Pure data structures with no I/O. `Project.progress` is a computed
field: it is always derived from the task list, serialized for
display, and ignored when a record is loaded.
"""

from datetime import date
from enum import Enum
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, computed_field, field_validator

from pulseboard.domain.task.models import Task
from pulseboard.domain.task.progress import calculate_progress


def unique_names(names: list[str]) -> list[str]:
    """Drop repeated names, keeping the first occurrence's position."""
    return list(dict.fromkeys(names))


class Project(BaseModel):
    """A unit of work with a due date, priority, tasks and a team.

    Priority runs from 1 (most urgent) to 5.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    description: str = ""
    due_date: date
    priority: int = 3
    tasks: list[Task] = Field(default_factory=list)
    team: list[str] = Field(default_factory=list)

    @field_validator("team")
    @classmethod
    def _dedupe_team(cls, team: list[str]) -> list[str]:
        return unique_names(team)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def progress(self) -> int:
        """Completion percentage derived from `tasks`."""
        return calculate_progress(self.tasks)

    def find_task(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None


class ProjectDraft(BaseModel):
    """Create/update payload: a project without id or derived progress."""

    title: str
    description: str = ""
    due_date: date
    priority: int = 3
    tasks: list[Task] = Field(default_factory=list)
    team: list[str] = Field(default_factory=list)

    @classmethod
    def from_project(cls, project: Project) -> "ProjectDraft":
        return cls(**project.model_dump(exclude={"id", "progress"}))


# =============================================================================
# Filter / Sort Selections
# =============================================================================


class DeadlineBucket(str, Enum):
    """Partition of projects by due-date proximity."""

    ALL = "all"
    OVERDUE = "overdue"
    THIS_WEEK = "this-week"
    THIS_MONTH = "this-month"


class CompletionBucket(str, Enum):
    """Partition of projects by derived progress."""

    ALL = "all"
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class SortKey(str, Enum):
    """Orderings available for project listings."""

    NAME = "name"
    PROGRESS = "progress"
    DUE_DATE = "due_date"

    @classmethod
    def _missing_(cls, value: object) -> "SortKey | None":
        # Accept the camelCase and hyphenated spellings used by the web client
        if value in ("dueDate", "due-date"):
            return cls.DUE_DATE
        return None


Priority = Annotated[int, Field(ge=1, le=5)]


class ProjectFilters(BaseModel):
    """Filter selections for a project listing.

    The default value passes every project.
    """

    deadline: DeadlineBucket = DeadlineBucket.ALL
    priority: Priority | Literal["all"] = "all"
    completion: CompletionBucket = CompletionBucket.ALL
    team_member: str = ""
    search: str = ""

    model_config = {"frozen": True}
