"""Dashboard view state.

Filter, sort and expansion selections as one immutable value that is
passed into the pure filter/sort functions instead of living in
ambient mutable fields. Expansion is presentation only: it changes how
many task rows are shown, never the data or the timeline cells.
"""

from datetime import date

from pydantic import BaseModel

from pulseboard.domain.project import (
    Project,
    ProjectFilters,
    SortKey,
    filter_projects,
    sort_projects,
)
from pulseboard.domain.task import Task

COLLAPSED_TASK_ROWS = 3


class ViewState(BaseModel):
    """Current listing selections. Every change returns a new ViewState."""

    filters: ProjectFilters = ProjectFilters()
    sort_key: SortKey | None = None
    expanded_ids: frozenset[str] = frozenset()

    model_config = {"frozen": True}

    def with_filters(self, **changes: object) -> "ViewState":
        filters = self.filters.model_copy(update=changes)
        # Round-trip through validation so bad selections are rejected
        return self.model_copy(update={"filters": ProjectFilters(**filters.model_dump())})

    def with_sort(self, key: SortKey | str | None) -> "ViewState":
        """Select a sort key; an unrecognized key leaves listings in stored order."""
        try:
            sort_key = SortKey(key) if key else None
        except ValueError:
            sort_key = None
        return self.model_copy(update={"sort_key": sort_key})

    def toggle_expanded(self, project_id: str) -> "ViewState":
        return self.model_copy(update={"expanded_ids": self.expanded_ids ^ {project_id}})

    def is_expanded(self, project_id: str) -> bool:
        return project_id in self.expanded_ids

    def visible_projects(self, projects: list[Project], today: date | None = None) -> list[Project]:
        """Filter, then sort when a sort key is selected."""
        visible = filter_projects(projects, self.filters, today)
        if self.sort_key is None:
            return visible
        return sort_projects(visible, self.sort_key)

    def visible_tasks(self, project: Project) -> tuple[list[Task], int]:
        """Task rows to render and how many are hidden.

        Collapsed projects show their first three tasks.
        """
        if self.is_expanded(project.id):
            return list(project.tasks), 0
        shown = project.tasks[:COLLAPSED_TASK_ROWS]
        return list(shown), len(project.tasks) - len(shown)
