"""Base domain event.

Events are immutable records of something that happened to a project
or task. Services return them next to the updated aggregate; the
interfaces hand them to the notifier.
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event gets a unique id and the UTC time it was raised.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}
