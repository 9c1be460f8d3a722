"""Project domain events.

Immutable records of project lifecycle changes. The `action` field is
the tag handed to the notification collaborator.
"""

from typing import Literal

from pulseboard.domain.shared.events import DomainEvent


class ProjectCreated(DomainEvent):
    """A new project was registered."""

    project_id: str
    title: str
    action: Literal["created"] = "created"


class ProjectUpdated(DomainEvent):
    """A project's fields, tasks or team changed."""

    project_id: str
    title: str
    progress: int
    action: Literal["updated"] = "updated"
