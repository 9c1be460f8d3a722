"""Notification collaborator.

Best-effort, fire-and-forget notices when a project is created or
updated. Delivery (email, chat) is out of scope; the shipped notifier
writes to the log. Notifier failures never reach the caller.
"""

import logging
from typing import Literal, Protocol

from pulseboard.domain.project import Project

logger = logging.getLogger(__name__)

NotifyAction = Literal["created", "updated"]


class Notifier(Protocol):
    def notify(self, project: Project, action: NotifyAction) -> None: ...


class LoggingNotifier:
    """Notifier that records each notice in the application log."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, project: Project, action: NotifyAction) -> None:
        self._log.info(
            f"Project {action}: {project.title} ({project.id}) "
            f"- {project.progress}% of {len(project.tasks)} task(s)"
        )


def notify_quietly(notifier: Notifier | None, project: Project, action: NotifyAction) -> bool:
    """Send a notice, logging instead of raising if the notifier fails.

    Returns:
        True if the notifier accepted the notice.
    """
    if notifier is None:
        return False
    try:
        notifier.notify(project, action)
        return True
    except Exception as e:
        logger.warning(f"Notification for project {project.id} failed: {e}")
        return False
