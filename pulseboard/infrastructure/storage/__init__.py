"""Storage infrastructure for Pulseboard.

Persistence for projects, using Result types for explicit error
handling.
"""

from pulseboard.infrastructure.storage.json_storage import JsonStorage
from pulseboard.infrastructure.storage.repositories import ProjectRepository

__all__ = [
    "JsonStorage",
    "ProjectRepository",
]
