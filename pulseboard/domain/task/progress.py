"""Progress calculation and the task status-transition rule.

All functions are pure - no I/O, no side effects.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from .models import Task, TaskStatus


def percent(part: int, whole: int) -> int:
    """Integer percentage of `part` in `whole`, rounded half up.

    Uses integer arithmetic so 12.5 becomes 13 (Python's round() would
    give 12). Returns 0 when `whole` is 0.

    Args:
        part: Counted items (0 <= part <= whole)
        whole: Total items

    Returns:
        Percentage in the range 0-100
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def count_completed(tasks: Iterable[Task]) -> int:
    return sum(1 for task in tasks if task.status == TaskStatus.COMPLETED)


def calculate_progress(tasks: list[Task]) -> int:
    """Derive a completion percentage from a task list.

    Example:
        4 tasks with 1 completed -> 25

    Args:
        tasks: The project's tasks

    Returns:
        0-100, or 0 for an empty list
    """
    return percent(count_completed(tasks), len(tasks))


def set_task_status(
    task: Task,
    status: TaskStatus,
    now: datetime | None = None,
) -> Task:
    """Return a copy of `task` moved to `status`.

    Moving into COMPLETED stamps `completed_at` (an already-completed task
    keeps its original stamp). Any other status clears it.

    Args:
        task: Task to transition
        status: New status
        now: Timestamp to record, defaults to the current UTC time

    Returns:
        New Task with status and completed_at updated together
    """
    status = TaskStatus(status)
    if status == TaskStatus.COMPLETED:
        completed_at = task.completed_at
        if task.status != TaskStatus.COMPLETED or completed_at is None:
            completed_at = now or datetime.now(UTC)
    else:
        completed_at = None
    return task.model_copy(update={"status": status, "completed_at": completed_at})
