"""Task domain models.

Pure data models. Pydantic is used so the same classes serialize to
the JSON store and the API without a separate mapping layer.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


class TaskStatus(str, Enum):
    """Status of a task within a project."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Task(BaseModel):
    """A unit of work inside a project.

    `completed_at` is only managed through `set_task_status`; it is
    present exactly when the task is completed.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    title: str
    status: TaskStatus = TaskStatus.TODO
    assignees: list[str] = Field(default_factory=list)
    due_date: date | None = None
    completed_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _migrate_single_assignee(cls, data: Any) -> Any:
        # Older records stored one "assignee" string per task
        if isinstance(data, dict) and "assignee" in data and "assignees" not in data:
            data = dict(data)
            legacy = data.pop("assignee")
            data["assignees"] = [legacy] if legacy else []
        return data

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
