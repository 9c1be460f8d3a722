"""Dashboard aggregation.

Cross-project statistics, recomputed in full from the snapshot on
every call. Pure - no I/O, no caching.
"""

from collections.abc import Iterable

from pydantic import BaseModel

from pulseboard.domain.project import Project
from pulseboard.domain.task import TaskStatus, percent


class DashboardStats(BaseModel):
    """Statistics across all projects.

    Provides the headline counts and the overall task completion used
    by the dashboard summary.
    """

    total_projects: int = 0
    completed_projects: int = 0
    in_progress_projects: int = 0
    total_tasks: int = 0
    completed_tasks: int = 0
    in_progress_tasks: int = 0
    todo_tasks: int = 0
    team_members: int = 0
    overall_progress: int = 0


def compute_dashboard_stats(projects: Iterable[Project]) -> DashboardStats:
    """Aggregate a project collection into dashboard statistics.

    Team members are deduplicated by exact name across projects.
    Overall progress is completed tasks over all tasks, rounded half up.

    Args:
        projects: Current snapshot of projects.

    Returns:
        DashboardStats for the snapshot.
    """
    projects = list(projects)
    task_counts = {status: 0 for status in TaskStatus}
    members: set[str] = set()

    for project in projects:
        members.update(project.team)
        for task in project.tasks:
            task_counts[task.status] += 1

    total_tasks = sum(task_counts.values())
    completed_tasks = task_counts[TaskStatus.COMPLETED]

    return DashboardStats(
        total_projects=len(projects),
        completed_projects=sum(1 for p in projects if p.progress == 100),
        in_progress_projects=sum(1 for p in projects if 0 < p.progress < 100),
        total_tasks=total_tasks,
        completed_tasks=completed_tasks,
        in_progress_tasks=task_counts[TaskStatus.IN_PROGRESS],
        todo_tasks=task_counts[TaskStatus.TODO],
        team_members=len(members),
        overall_progress=percent(completed_tasks, total_tasks),
    )
