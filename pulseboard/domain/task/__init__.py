"""Task domain.

Key Types:
    TaskStatus - todo / in-progress / completed
    Task - a unit of work inside a project

Progress Functions:
    calculate_progress - completion percentage of a task list
    set_task_status - status transition keeping completed_at consistent
    percent - round-half-up integer percentage

Domain Events:
    TaskAdded, TaskCompleted, TaskStatusChanged
"""

from .events import TaskAdded, TaskCompleted, TaskStatusChanged
from .models import Task, TaskStatus
from .progress import calculate_progress, count_completed, percent, set_task_status

__all__ = [
    # Models
    "Task",
    "TaskStatus",
    # Progress
    "calculate_progress",
    "count_completed",
    "percent",
    "set_task_status",
    # Events
    "TaskAdded",
    "TaskCompleted",
    "TaskStatusChanged",
]
