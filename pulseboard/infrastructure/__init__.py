"""Infrastructure layer for Pulseboard.

I/O adapters for the external collaborators, returning Result types
for explicit error handling.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - ProjectRepository: Project persistence (the persistence collaborator)

    Notifications:
        - Notifier: Protocol for project notices
        - LoggingNotifier: Notifier writing to the application log
        - notify_quietly: Fire-and-forget helper
"""

from pulseboard.infrastructure.notifications import (
    LoggingNotifier,
    Notifier,
    notify_quietly,
)
from pulseboard.infrastructure.storage import JsonStorage, ProjectRepository

__all__ = [
    # Storage
    "JsonStorage",
    "ProjectRepository",
    # Notifications
    "Notifier",
    "LoggingNotifier",
    "notify_quietly",
]
