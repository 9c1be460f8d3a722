"""Project domain package.

The project aggregate (models, events) plus the filter and sort
logic applied to project listings.
"""

from pulseboard.domain.project.events import ProjectCreated, ProjectUpdated
from pulseboard.domain.project.filtering import (
    completion_matches,
    deadline_matches,
    filter_projects,
    matches_filters,
)
from pulseboard.domain.project.models import (
    CompletionBucket,
    DeadlineBucket,
    Project,
    ProjectDraft,
    ProjectFilters,
    SortKey,
    unique_names,
)
from pulseboard.domain.project.sorting import collation_key, sort_projects

__all__ = [
    # Models
    "Project",
    "ProjectDraft",
    "ProjectFilters",
    "DeadlineBucket",
    "CompletionBucket",
    "SortKey",
    "unique_names",
    # Filtering
    "matches_filters",
    "filter_projects",
    "deadline_matches",
    "completion_matches",
    # Sorting
    "sort_projects",
    "collation_key",
    # Events
    "ProjectCreated",
    "ProjectUpdated",
]
