"""Task domain events.

Immutable records of task changes inside a project. Pure data.
"""

from pulseboard.domain.shared.events import DomainEvent

from .models import TaskStatus


class TaskAdded(DomainEvent):
    """A task was appended to a project's task list."""

    project_id: str
    task_id: str
    title: str


class TaskCompleted(DomainEvent):
    """A task moved into the completed status."""

    project_id: str
    task_id: str
    title: str
    progress: int


class TaskStatusChanged(DomainEvent):
    """A task moved between non-completing statuses (including reopening)."""

    project_id: str
    task_id: str
    previous: TaskStatus
    current: TaskStatus
    progress: int
