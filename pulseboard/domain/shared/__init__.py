"""Shared domain building blocks.

- Result type (Ok / Err) for expected failures
- DomainEvent base for project and task events

Example usage:
    >>> from pulseboard.domain.shared import Err, Ok, Result
    >>>
    >>> def find_project(project_id: str) -> Result[dict, str]:
    ...     if not project_id:
    ...         return Err("Project id is required")
    ...     return Ok({"id": project_id})
"""

from pulseboard.domain.shared.events import DomainEvent
from pulseboard.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    # Result
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "flat_map",
    "unwrap_or",
    # Events
    "DomainEvent",
]
