"""Project filter predicates.

All functions are pure - no I/O, no side effects. The current date is
always passed in so results are reproducible.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from pulseboard.domain.dates import add_months, as_date

from .models import CompletionBucket, DeadlineBucket, Project, ProjectFilters

WEEK = timedelta(days=7)


# =============================================================================
# Predicate Functions
# =============================================================================


def deadline_matches(due_date: date, bucket: DeadlineBucket, today: date) -> bool:
    """Check a due date against a deadline bucket (day granularity).

    - overdue: due before today
    - this-week: due between today and today + 7 days, inclusive
    - this-month: due between today and the same day next month,
      inclusive, with the end clamped to the target month's last day
    """
    if bucket == DeadlineBucket.OVERDUE:
        return due_date < today
    if bucket == DeadlineBucket.THIS_WEEK:
        return today <= due_date <= today + WEEK
    if bucket == DeadlineBucket.THIS_MONTH:
        return today <= due_date <= add_months(today, 1)
    return True


def completion_matches(progress: int, bucket: CompletionBucket) -> bool:
    """Check a progress value against a completion bucket.

    not-started, in-progress and completed partition 0-100 with no
    overlap and no gap.
    """
    if bucket == CompletionBucket.NOT_STARTED:
        return progress == 0
    if bucket == CompletionBucket.IN_PROGRESS:
        return 0 < progress < 100
    if bucket == CompletionBucket.COMPLETED:
        return progress == 100
    return True


def search_matches(project: Project, term: str) -> bool:
    if not term:
        return True
    needle = term.casefold()
    return needle in project.title.casefold() or needle in project.description.casefold()


def matches_filters(
    project: Project,
    filters: ProjectFilters,
    today: date | datetime,
) -> bool:
    """Check whether a project passes every active filter.

    Args:
        project: Project to evaluate
        filters: Current filter selections
        today: Reference date for the deadline buckets

    Returns:
        True only if the deadline, priority, completion, team member
        and search predicates all pass
    """
    if not deadline_matches(project.due_date, filters.deadline, as_date(today)):
        return False
    if filters.priority != "all" and project.priority != filters.priority:
        return False
    if not completion_matches(project.progress, filters.completion):
        return False
    if filters.team_member and filters.team_member not in project.team:
        return False
    return search_matches(project, filters.search)


# =============================================================================
# Collection Operations
# =============================================================================


def filter_projects(
    projects: Iterable[Project],
    filters: ProjectFilters,
    today: date | datetime | None = None,
) -> list[Project]:
    """Return the projects passing `filters`, in their original order.

    Args:
        projects: Snapshot to filter (not modified)
        filters: Current filter selections
        today: Reference date, defaults to the local current date

    Returns:
        New list with the passing projects
    """
    reference = as_date(today) if today is not None else date.today()
    return [p for p in projects if matches_filters(p, filters, reference)]
