"""Request/Response schemas for the Pulseboard API.

These Pydantic models define the API contract for request bodies that
are not plain domain models. Project create/update bodies reuse
ProjectDraft directly.
"""

from datetime import date

from pydantic import BaseModel, Field

from pulseboard.domain.task import TaskStatus


class AddTaskRequest(BaseModel):
    """Request to append a task to a project."""

    title: str
    assignees: list[str] = Field(default_factory=list)
    due_date: date | None = None
    status: TaskStatus = TaskStatus.TODO


class UpdateStatusRequest(BaseModel):
    """Request to move a task to a new status."""

    status: TaskStatus


class TeamMemberRequest(BaseModel):
    """Request to add a person to a project's team."""

    name: str
