"""Application service layer for Pulseboard.

Services orchestrate domain operations. Apart from the save
coordinator, which writes through to a store it is handed, they are
pure functions without I/O.

Services:
    project_service - Project/task lifecycle (create, update, add task, status)
    dashboard_service - Cross-project statistics
    view_state - Filter/sort/expansion selections for listings
    save_coordinator - Write-through saves with instant local feedback

Example usage:
    >>> from pulseboard.application import compute_dashboard_stats
    >>> stats = compute_dashboard_stats(projects)
    >>> print(f"{stats.completed_tasks}/{stats.total_tasks} tasks done")
"""

from pulseboard.application.dashboard_service import (
    DashboardStats,
    compute_dashboard_stats,
)
from pulseboard.application.project_service import (
    add_task,
    add_team_member,
    change_task_status,
    create_project,
    remove_task,
    remove_team_member,
    settle_tasks,
    update_project,
    validate_draft,
)
from pulseboard.application.save_coordinator import ProjectStore, SaveCoordinator
from pulseboard.application.view_state import COLLAPSED_TASK_ROWS, ViewState

__all__ = [
    # Project service
    "create_project",
    "update_project",
    "validate_draft",
    "add_task",
    "change_task_status",
    "remove_task",
    "settle_tasks",
    "add_team_member",
    "remove_team_member",
    # Dashboard service
    "DashboardStats",
    "compute_dashboard_stats",
    # View state
    "ViewState",
    "COLLAPSED_TASK_ROWS",
    # Save coordinator
    "SaveCoordinator",
    "ProjectStore",
]
